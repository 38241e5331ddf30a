from __future__ import annotations

import importlib.util
import sys
from pathlib import Path

# Make the mobile_storage package importable when running tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from mobile_storage.core import config as core_config  # noqa: E402


def _load_demo():
    spec = importlib.util.spec_from_file_location("mobile_storage_demo", ROOT / "scripts" / "demo.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_demo_walkthrough_prints_each_step(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["demo.py", "--backend", "memory"])
    core_config.get_settings.cache_clear()
    demo = _load_demo()
    monkeypatch.setattr(demo, "setup_logging", lambda *a, **kw: None)

    demo.main()

    out = capsys.readouterr().out
    assert "save: Mobile(imei='someImei2', model='iPhone6')" in out
    assert "exists someImei1: True" in out
    assert "duplicate save: Mobile already exists" in out
    assert "find_by_imei someImei3: Mobile(imei='someImei3', model='iPhone 7')" in out
    assert "find_by_imei 1234564: None" in out
    assert "  someImei1  iPhone5" in out
