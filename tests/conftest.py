"""Shared fixtures for the univietqr test-suite."""
from __future__ import annotations

import logging
import re
from decimal import Decimal

import pytest

CRC_SEGMENT = re.compile(r"6304[0-9A-F]{4}$")


@pytest.fixture
def bank_record() -> dict:
    return {
        "bank_id": "970418",
        "account_number": "123456789",
        "account_name": "NGUYENVANA",
        "amount": Decimal("1000.5"),
        "message": "Invoice123",
    }


@pytest.fixture
def momo_record() -> dict:
    return {
        "partner_code": "MOMO",
        "partner_ref_id": "123456789",
        "amount": 50000,
        "description": "Order123",
    }


@pytest.fixture
def zalopay_record() -> dict:
    return {
        "app_id": "2553",
        "zp_trans_id": "240101000001",
        "amount": 75000,
        "description": "Topup",
    }


@pytest.fixture
def restore_univietqr_logger():
    logger = logging.getLogger("univietqr")
    handlers, level = list(logger.handlers), logger.level
    yield logger
    for handler in logger.handlers:
        if handler not in handlers:
            logger.removeHandler(handler)
    logger.setLevel(level)
