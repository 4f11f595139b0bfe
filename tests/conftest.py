import pytest


def _pitcher(pid, name=None, era=4.0, whip=1.25, w=10, sv=0, so=150, ip=150.0, **extra):
    row = {
        "PlayerId": pid,
        "Name": name if name is not None else f"Pitcher {pid}",
        "Team": "NYM",
        "ERA": era,
        "WHIP": whip,
        "W": w,
        "SV": sv,
        "SO": so,
        "IP": ip,
    }
    row.update(extra)
    return row


@pytest.fixture
def make_pitcher():
    return _pitcher


@pytest.fixture
def ace_rows():
    """Three identical aces that differ only in IP, plus a league-average arm."""
    return [
        _pitcher("1", "Ace High", era=3.00, whip=1.00, w=15, sv=0, so=200, ip=200),
        _pitcher("2", "Ace Low", era=3.00, whip=1.00, w=15, sv=0, so=200, ip=50),
        _pitcher("3", "Ace Mid", era=3.00, whip=1.00, w=15, sv=0, so=200, ip=150),
        _pitcher("4", "Avg Joe", era=4.00, whip=1.30, w=10, sv=0, so=100, ip=150),
    ]


@pytest.fixture
def staff_rows():
    """A small mixed pool of starters and relievers."""
    return [
        _pitcher("sp1", "Starter One", era=2.90, whip=1.02, w=16, sv=0, so=230, ip=200),
        _pitcher("sp2", "Starter Two", era=3.40, whip=1.10, w=13, sv=0, so=190, ip=185),
        _pitcher("sp3", "Starter Three", era=4.10, whip=1.28, w=10, sv=0, so=150, ip=170),
        _pitcher("sp4", "Starter Four", era=4.80, whip=1.40, w=8, sv=0, so=120, ip=150),
        _pitcher("rp1", "Closer One", era=2.70, whip=1.00, w=4, sv=38, so=85, ip=65),
        _pitcher("rp2", "Closer Two", era=3.50, whip=1.18, w=3, sv=25, so=70, ip=62),
        _pitcher("rp3", "Setup Man", era=3.90, whip=1.25, w=5, sv=2, so=60, ip=60),
        _pitcher("rp4", "Mop Up", era=5.20, whip=1.50, w=2, sv=0, so=45, ip=55),
    ]
