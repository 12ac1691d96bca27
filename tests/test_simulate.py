from solarquote import simulate
from solarquote.compute import GeocodingError
from solarquote.models import SiteLocation


def test_reference_run(capsys):
    code = simulate.main(
        ["--panels", "20", "--wattage", "0.4", "--tilt", "30", "--lat", "45"]
    )
    out = capsys.readouterr().out
    assert code == 0
    assert "9\u202f659 kWh" in out
    assert "1\u202f931,85\u00a0€" in out
    assert "Retour sur investissement" not in out


def test_payback_printed_with_cost(capsys):
    code = simulate.main(["--panels", "20", "--lat", "45", "--cost", "12000"])
    assert code == 0
    assert "6,2 ans" in capsys.readouterr().out


def test_location_required(capsys):
    assert simulate.main(["--panels", "10"]) == 2
    assert "--lat" in capsys.readouterr().err


def test_address_is_geocoded(monkeypatch, capsys):
    monkeypatch.setattr(
        simulate, "geocode_address", lambda address: SiteLocation(45.0, 4.85)
    )
    assert simulate.main(["--panels", "20", "--address", "Lyon"]) == 0
    assert "9\u202f659 kWh" in capsys.readouterr().out


def test_unknown_address(monkeypatch, capsys):
    def fail(address):
        raise GeocodingError(f"Address not found: {address}")

    monkeypatch.setattr(simulate, "geocode_address", fail)
    assert simulate.main(["--panels", "20", "--address", "nulle part"]) == 1
    assert "nulle part" in capsys.readouterr().err
