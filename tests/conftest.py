import logging

import pytest

from sigillium.keys import derive_keypair

from vectors import LEGAL_PHRASE, ZERO_PHRASE


@pytest.fixture
def zero_keypair():
    kp = derive_keypair(ZERO_PHRASE)
    yield kp
    kp.close()


@pytest.fixture
def legal_keypair():
    kp = derive_keypair(LEGAL_PHRASE)
    yield kp
    kp.close()


@pytest.fixture(autouse=True)
def _drop_cli_log_handlers():
    # The CLI attaches a handler bound to the runner's (then closed) stderr.
    yield
    logger = logging.getLogger("sigillium")
    for handler in list(logger.handlers):
        if getattr(handler, "_sigillium", False):
            logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
