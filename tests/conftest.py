import pytest

import seqtest
from seqtest.reporting import base as reporting_base


@pytest.fixture
def fresh_bootstrap(monkeypatch):
    """Allow ``bootstrap`` to run again and undo reporter registrations."""

    monkeypatch.setattr(seqtest, "_BOOTSTRAPPED", False)
    monkeypatch.setattr(reporting_base, "_FACTORIES", dict(reporting_base._FACTORIES))
    monkeypatch.delenv("SEQTEST_PLUGINS", raising=False)
