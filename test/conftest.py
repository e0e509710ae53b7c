"""
Test Configuration and Fixtures

This module provides:
- Test environment variables (log directory) set before application imports
- A fresh DI container per test so ledger state never leaks between tests
- Shared identities and a funded payment rail

Architecture:
- Unit tests (test/**/unit/): exercise entities, adapters and use cases directly
- Integration tests (test/**/integration/): BDD scenarios driven through the block sequencer
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings and the loguru sinks read the environment at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)
    os.environ.setdefault('DEPLOY_ENV', 'test')


_early_setup_test_environment()

import pytest  # noqa: E402

from src.platform.config.di import Container  # noqa: E402
from src.service.ticket_ledger.driven_adapter.payment.in_memory_payment_rail_impl import (  # noqa: E402
    InMemoryPaymentRailImpl,
)
from src.service.ticket_ledger.driving_adapter.block_sequencer import BlockSequencer  # noqa: E402


# =============================================================================
# Identities
# =============================================================================
DEPLOYER = 'deployer'
ORGANIZER = 'wallet-organizer-1'
ANOTHER_ORGANIZER = 'wallet-organizer-2'
BUYER = 'wallet-buyer-1'
ANOTHER_BUYER = 'wallet-buyer-2'
ESCROW = 'platform-escrow'

STARTING_BALANCE = 100_000_000_000


@pytest.fixture
def identities() -> dict[str, str]:
    return {
        'deployer': DEPLOYER,
        'organizer': ORGANIZER,
        'another_organizer': ANOTHER_ORGANIZER,
        'buyer': BUYER,
        'another_buyer': ANOTHER_BUYER,
        'escrow': ESCROW,
    }


@pytest.fixture
def container() -> Container:
    """Fresh container: new ledger state, clock and payment rail per test"""
    return Container()


@pytest.fixture
def payment_rail(container: Container, identities: dict[str, str]) -> InMemoryPaymentRailImpl:
    rail = container.payment_rail()
    for name in ('organizer', 'another_organizer', 'buyer', 'another_buyer'):
        rail.fund(identity=identities[name], amount=STARTING_BALANCE)
    return rail


@pytest.fixture
def sequencer(container: Container, payment_rail: InMemoryPaymentRailImpl) -> BlockSequencer:
    return container.block_sequencer()
