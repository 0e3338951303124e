## shortopts — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import pytest


@pytest.fixture(autouse=True)
def _gnu_scanning(monkeypatch):
    # The standard scanner stops permuting whenever POSIXLY_CORRECT is set.
    monkeypatch.delenv("POSIXLY_CORRECT", raising=False)
