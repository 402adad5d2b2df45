from er_save_copy.assets import icon_generator
from er_save_copy.assets.loader import get_asset_path, load_image


def test_generated_icons(tmp_path):
    icon_generator.generate_all_icons(tmp_path)

    names = sorted(path.name for path in tmp_path.iterdir())
    assert names == ["app_icon.ico", "app_icon.png", "copy.png", "gear.png"]


def test_icon_sizes():
    assert icon_generator.create_gear_icon(32).size == (32, 32)
    assert icon_generator.create_copy_icon(24).size == (24, 24)
    assert icon_generator.create_app_icon(64).mode == "RGBA"


def test_missing_image_returns_none():
    assert load_image("icons/does_not_exist.png") is None


def test_asset_path_inside_package():
    assert get_asset_path("icons/gear.png").parts[-3:] == ("assets", "icons", "gear.png")
