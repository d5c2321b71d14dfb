import sys
from pathlib import Path

# Add the src directory to sys.path so that oop_showcase can be imported
SRC_DIR = Path(__file__).resolve().parents[1] / "src"
sys.path.insert(0, str(SRC_DIR))

import json

import pytest

from oop_showcase.config_service import ConfigService
from oop_showcase.instruments import AcousticGuitar, BassGuitar, ElectricGuitar, Piano
from oop_showcase.music import Music
from oop_showcase.roster_service import RosterService


def test_kinds_are_sorted():
    assert RosterService.kinds() == ["acoustic", "bass", "electric", "piano"]


def test_build_instrument_kinds_case_insensitive():
    roster = RosterService()
    piano = roster.build_instrument({"kind": "Piano", "brand": "Lomi", "has_pedal": True})
    assert isinstance(piano, Piano)
    assert piano.has_pedal
    acoustic = roster.build_instrument({"kind": "ACOUSTIC", "brand": "Aloha"})
    assert isinstance(acoustic, AcousticGuitar)
    assert acoustic.string_gauge == "light"


def test_amplified_instruments_share_one_amplifier():
    roster = RosterService()
    electric = roster.build_instrument({"kind": "electric", "brand": "Gibson"})
    bass = roster.build_instrument({"kind": "bass", "brand": "Fender"})
    assert isinstance(electric, ElectricGuitar)
    assert isinstance(bass, BassGuitar)
    assert electric.amplifier is bass.amplifier is roster.amplifier
    electric.tune()
    assert bass.play(Music(["E"])) == "Play bass line E at volume 5."


@pytest.mark.parametrize(
    "spec",
    [
        {"kind": "theremin", "brand": "Moog"},
        {"kind": "piano"},
        {"kind": "piano", "brand": "  "},
        "piano",
    ],
)
def test_build_instrument_rejects_bad_specs(spec):
    with pytest.raises(ValueError):
        RosterService().build_instrument(spec)


def test_build_band_keeps_order():
    roster = RosterService(
        {
            "instruments": [
                {"kind": "bass", "brand": "Fender"},
                {"kind": "piano", "brand": "Lomi"},
            ]
        }
    )
    band = roster.build_band()
    assert [type(i) for i in band] == [BassGuitar, Piano]


def test_build_band_requires_list():
    with pytest.raises(ValueError):
        RosterService({"instruments": {"kind": "piano"}}).build_band()


def test_defaults_reproduce_classic_line_up():
    defaults = ConfigService().load_defaults()
    assert defaults["music"] == ["C", "L", "C"]
    assert [spec["brand"] for spec in defaults["instruments"]] == ["Lomi", "Aloha", "Gibson", "Fender"]
    assert defaults["air_freshener"] == "Pine"


def test_portable_config_round_trip(tmp_path):
    service = ConfigService(app_dir=tmp_path)
    assert service.detect_mode(cli_portable=True)
    service.save_config({"music": ["E", "G"], "air_freshener": "Lemon"}, cli_portable=True)
    assert (tmp_path / "config.json").exists()
    cfg = service.load_config(cli_portable=True)
    assert cfg["music"] == ["E", "G"]
    assert cfg["air_freshener"] == "Lemon"
    # Missing keys come from the defaults
    assert len(cfg["instruments"]) == 4


def test_portable_flag_file_forces_portable_mode(tmp_path):
    (tmp_path / "portable.flag").write_text("", encoding="utf-8")
    service = ConfigService(app_dir=tmp_path)
    assert service.detect_mode(cli_portable=False)
    assert service.get_config_path() == tmp_path / "config.json"


def test_appdata_mode_uses_xdg_config_home(tmp_path, monkeypatch):
    monkeypatch.setattr("platform.system", lambda: "Linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    service = ConfigService(app_dir=tmp_path / "app")
    assert service.get_config_path() == tmp_path / "xdg" / "OOPShowcase" / "config.json"


def test_invalid_config_falls_back_to_defaults(tmp_path, capsys):
    (tmp_path / "config.json").write_text(json.dumps({"music": "C L C"}), encoding="utf-8")
    service = ConfigService(app_dir=tmp_path)
    cfg = service.load_config(cli_portable=True)
    assert cfg == service.load_defaults()
    assert "Warning:" in capsys.readouterr().out


def test_unparseable_config_falls_back_to_defaults(tmp_path, capsys):
    (tmp_path / "config.json").write_text("{not json", encoding="utf-8")
    service = ConfigService(app_dir=tmp_path)
    assert service.load_config(cli_portable=True) == service.load_defaults()
    assert "Warning:" in capsys.readouterr().out


def test_non_utf8_config_falls_back_to_defaults(tmp_path, capsys):
    (tmp_path / "config.json").write_bytes(b'{"music": ["\xff\xfe"]}')
    service = ConfigService(app_dir=tmp_path)
    assert service.load_config(cli_portable=True) == service.load_defaults()
    assert "Warning: Could not parse" in capsys.readouterr().out


def test_save_rejects_invalid_config(tmp_path):
    service = ConfigService(app_dir=tmp_path)
    with pytest.raises(ValueError):
        service.save_config({"instruments": [{"kind": "piano"}]}, cli_portable=True)
    assert not (tmp_path / "config.json").exists()
