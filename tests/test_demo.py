# tests/test_demo.py
import pytest

import demo
from autoshop.errors import InsufficientPaymentError
from autoshop.store import Store


def test_demo_prints_summaries(capsys):
    demo.main()
    out = capsys.readouterr().out
    assert "has 3 products available" in out
    assert "has sold 2 products at 5014000.00" in out
    assert "has processed 1 orders totalling 5014000.00" in out
    assert "Deleted 1 products" in out


def test_demo_exits_non_zero_on_error(monkeypatch, capsys):
    def refuse(self, order_in):
        raise InsufficientPaymentError(5014000, 0)

    monkeypatch.setattr(Store, "sell_products", refuse)
    with pytest.raises(SystemExit) as exc:
        demo.main()
    assert exc.value.code == 1
    assert "not enough" in capsys.readouterr().out
