from __future__ import annotations

import pytest

from fakeshop import FakeShop


@pytest.fixture
def shop() -> FakeShop:
    return FakeShop()
