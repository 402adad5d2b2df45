from er_save_copy.core.save_locator import SaveLocator


def test_prefers_app_directory(tmp_path):
    app_dir = tmp_path / "app"
    profile = tmp_path / "EldenRing" / "76561198000000001"
    app_dir.mkdir()
    profile.mkdir(parents=True)
    (app_dir / "ER0000.co2").write_bytes(b"")
    (profile / "ER0000.sl2").write_bytes(b"")

    locator = SaveLocator(app_dir, tmp_path / "EldenRing")

    assert locator.find_save_file() == app_dir / "ER0000.co2"


def test_vanilla_save_preferred_over_coop(tmp_path):
    (tmp_path / "ER0000.sl2").write_bytes(b"")
    (tmp_path / "ER0000.co2").write_bytes(b"")

    assert SaveLocator(tmp_path, tmp_path / "none").find_in_directory(tmp_path) == tmp_path / "ER0000.sl2"


def test_falls_back_to_profiles(tmp_path):
    root = tmp_path / "EldenRing"
    for steam_id in ("76561198000000002", "76561198000000001"):
        (root / steam_id).mkdir(parents=True)
        (root / steam_id / "ER0000.sl2").write_bytes(b"")
    (root / "GraphicsConfig.xml").write_text("")

    locator = SaveLocator(tmp_path / "app", root)

    assert locator.profile_saves() == [
        root / "76561198000000001" / "ER0000.sl2",
        root / "76561198000000002" / "ER0000.sl2",
    ]
    assert locator.find_save_file() == root / "76561198000000001" / "ER0000.sl2"
    assert locator.initial_directory() == root


def test_nothing_found(tmp_path):
    locator = SaveLocator(tmp_path, tmp_path / "missing")
    assert locator.find_save_file() is None
    assert locator.initial_directory() is None
