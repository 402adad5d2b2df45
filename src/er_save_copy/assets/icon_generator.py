"""Generate the application icons.

Run this script directly to generate icons:
    python -m er_save_copy.assets.icon_generator

The main window falls back to text-only buttons when the icons are missing.
"""

from pathlib import Path

from PIL import Image, ImageDraw

# Gold and dark grey of the main window
GOLD = (218, 165, 32, 255)
DARK = (32, 32, 32, 255)
WHITE = (240, 240, 240, 255)


def create_gear_icon(size: int = 32) -> Image.Image:
    """Create a simple gear icon for the settings button."""
    img = Image.new('RGBA', (size, size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)

    center = size // 2
    outer_radius = size // 2 - 2
    inner_radius = size // 4
    tooth = max(size // 8, 2)

    # Teeth on the four axes
    for dx, dy in ((0, -1), (0, 1), (-1, 0), (1, 0)):
        x = center + dx * (outer_radius - tooth // 2)
        y = center + dy * (outer_radius - tooth // 2)
        draw.rectangle([x - tooth, y - tooth, x + tooth, y + tooth], fill=WHITE)

    draw.ellipse(
        [center - outer_radius + tooth, center - outer_radius + tooth,
         center + outer_radius - tooth, center + outer_radius - tooth],
        fill=WHITE
    )

    # Center hole
    draw.ellipse(
        [center - inner_radius // 2, center - inner_radius // 2,
         center + inner_radius // 2, center + inner_radius // 2],
        fill=(0, 0, 0, 0)
    )

    return img


def create_copy_icon(size: int = 32) -> Image.Image:
    """Create a copy icon (two overlapping cards)."""
    img = Image.new('RGBA', (size, size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)

    card = size * 5 // 8
    offset = size - card - 2

    # Back card
    draw.rectangle([2, 2, 2 + card, 2 + card], outline=WHITE, width=max(size // 16, 1))
    # Front card
    draw.rectangle([offset, offset, offset + card, offset + card], fill=GOLD, outline=WHITE, width=max(size // 16, 1))

    return img


def create_app_icon(size: int = 256) -> Image.Image:
    """Create the application icon: a gold ring on a dark disc."""
    img = Image.new('RGBA', (size, size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)

    margin = size // 16
    draw.ellipse([margin, margin, size - margin, size - margin], fill=DARK)

    ring = size // 4
    center = size // 2
    draw.ellipse(
        [center - ring, center - ring, center + ring, center + ring],
        outline=GOLD,
        width=max(size // 16, 2)
    )

    return img


def generate_all_icons(output_dir: Path | None = None):
    """Generate all icons and save them to the icons directory."""
    if output_dir is None:
        output_dir = Path(__file__).parent / "icons"

    output_dir.mkdir(parents=True, exist_ok=True)

    gear = create_gear_icon(32)
    gear.save(output_dir / "gear.png")
    print(f"Created: {output_dir / 'gear.png'}")

    copy = create_copy_icon(32)
    copy.save(output_dir / "copy.png")
    print(f"Created: {output_dir / 'copy.png'}")

    app_256 = create_app_icon(256)
    app_256.save(output_dir / "app_icon.png")
    print(f"Created: {output_dir / 'app_icon.png'}")

    # ICO file with multiple sizes
    app_256.save(
        output_dir / "app_icon.ico",
        format='ICO',
        sizes=[(16, 16), (32, 32), (48, 48), (256, 256)]
    )
    print(f"Created: {output_dir / 'app_icon.ico'}")


if __name__ == "__main__":
    generate_all_icons()
