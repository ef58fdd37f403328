from pathlib import Path

from quadpress.cli import main, output_paths, run
from quadpress.image import Image, Pixel, export_image, import_image


def uniform_image(width, height, colour):
    return Image([[Pixel(*colour)] * width for _ in range(height)])


def test_output_paths():
    assert output_paths("img") == (
        "img.ppm",
        "img_compressed.bin",
        "img_recovered.ppm",
    )


def test_run_writes_recovered_image(tmp_path, capsys):
    base = str(tmp_path / "pic")
    image = uniform_image(6, 4, (20, 40, 60))
    export_image(base + ".ppm", image)
    recovered = run(base)
    assert recovered == image
    assert import_image(base + "_recovered.ppm") == image
    assert Path(base + "_compressed.bin").stat().st_size > 0
    assert "Compressing image. Resolution: 6x4" in capsys.readouterr().out


def test_run_recovered_has_source_dimensions(tmp_path):
    base = str(tmp_path / "stripes")
    rows = [[Pixel(0, 0, 0) if (x + y) % 2 else Pixel(255, 255, 255) for x in range(5)] for y in range(3)]
    export_image(base + ".ppm", Image(rows))
    recovered = run(base)
    assert (recovered.width, recovered.height) == (5, 3)


def test_main_success(tmp_path, capsys):
    base = str(tmp_path / "ok")
    export_image(base + ".ppm", uniform_image(2, 2, (1, 1, 1)))
    assert main([base]) == 0
    assert "Image successfully decoded." in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent")]) == 1
    assert "Error opening file" in capsys.readouterr().err