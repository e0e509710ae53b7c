from prometheus_client import Counter, Gauge, Histogram


class LedgerMetrics:
    """
    Ticket Ledger Core Metrics Collector

    Tracks operation outcomes per error code and the host block height
    """

    def __init__(self):
        self.operations = Counter(
            'ledger_operations_total',
            'Total ledger operations by outcome',
            ['operation', 'result'],  # result: ok / error code name
        )

        self.operation_duration = Histogram(
            'ledger_operation_duration_seconds',
            'Ledger operation processing time',
            ['operation'],
            buckets=[0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0],
        )

        self.block_height = Gauge('ledger_block_height', 'Current host block height')

    def record_operation(self, *, operation: str, result: str, duration: float):
        self.operations.labels(operation=operation, result=result).inc()
        self.operation_duration.labels(operation=operation).observe(duration)

    def update_block_height(self, *, height: int):
        self.block_height.set(height)


# Global metrics instance
metrics = LedgerMetrics()
