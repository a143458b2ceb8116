from __future__ import annotations

import io
import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout

from PIL import Image

from epdbitmap.app.cli import main
from epdbitmap.job import BitmapJobBuilder, ConversionSettings


class _ImageFiles(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.tmpdir = self._tmp.name
        checker = Image.new("RGB", (2, 2), (255, 255, 255))
        checker.putpixel((0, 0), (0, 0, 0))
        checker.putpixel((1, 1), (0, 0, 0))
        self.checker = self._save(checker, "wink frame.png")
        self.black = self._save(Image.new("RGB", (16, 4), (0, 0, 0)), "black.png")
        self.white = self._save(Image.new("RGB", (20, 8), (255, 255, 255)), "white.bmp")

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _save(self, img: Image.Image, name: str) -> str:
        path = os.path.join(self.tmpdir, name)
        img.save(path)
        return path

    def run_cli(self, *argv: str):
        out = io.StringIO()
        err = io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = main(list(argv))
        return code, out.getvalue(), err.getvalue()


class TestCli(_ImageFiles):
    def test_single_image_to_stdout(self) -> None:
        code, out, _ = self.run_cli(self.checker)
        self.assertEqual(code, 0)
        self.assertEqual(
            out,
            "// 'wink frame', 2x2px\n"
            "const unsigned char epd_bitmap_wink_frame [] PROGMEM = {\n"
            "\t0x80, 0x40\n"
            "};\n",
        )

    def test_label_override(self) -> None:
        code, out, _ = self.run_cli(self.checker, "--label", "eye")
        self.assertEqual(code, 0)
        self.assertIn("epd_bitmap_eye [] PROGMEM", out)

    def test_blend_to_file_with_preview(self) -> None:
        output = os.path.join(self.tmpdir, "fade.h")
        gif = os.path.join(self.tmpdir, "fade.gif")
        code, out, err = self.run_cli(
            self.black, self.white, "--frames", "4", "-o", output, "--preview-gif", gif, "--frame-table", "fade"
        )
        self.assertEqual(code, 0, err)
        self.assertEqual(out, "")
        with open(output, encoding="utf-8") as handle:
            text = handle.read()
        self.assertTrue(text.startswith("// Dithered blend frame 1/4, 16x4px\n"))
        self.assertIn("epd_bitmap_dithered_blend_3", text)
        self.assertTrue(text.endswith("const int fade_count = 4;\n"))
        with Image.open(gif) as img:
            self.assertEqual(img.size, (16, 4))

    def test_invalid_frame_count(self) -> None:
        code, _, err = self.run_cli(self.black, self.white, "--frames", "1")
        self.assertEqual(code, 2)
        self.assertIn("Frame count", err)

    def test_blend_options_rejected_for_single_image(self) -> None:
        for extra in (["--frames", "4"], ["--frame-table", "fade"], ["--preview-gif", "x.gif"]):
            with self.subTest(extra=extra):
                code, out, err = self.run_cli(self.checker, *extra)
                self.assertEqual(code, 2)
                self.assertEqual(out, "")
                self.assertIn(extra[0], err)
                self.assertIn("need two images", err)

    def test_missing_arguments(self) -> None:
        code, _, err = self.run_cli()
        self.assertEqual(code, 2)
        self.assertIn("Missing image path", err)
        code, _, _ = self.run_cli(self.black, self.white, self.checker)
        self.assertEqual(code, 2)

    def test_missing_file(self) -> None:
        code, _, err = self.run_cli(os.path.join(self.tmpdir, "nope.png"))
        self.assertEqual(code, 2)
        self.assertIn("File not found", err)

    def test_display_check(self) -> None:
        code, _, err = self.run_cli(self.white, "--display", "pcd8544_84x48")
        self.assertEqual(code, 0, err)
        big = self._save(Image.new("RGB", (200, 10)), "wide.png")
        code, _, err = self.run_cli(big, "--display", "ssd1306_128x32")
        self.assertEqual(code, 2)
        self.assertIn("does not fit", err)

    def test_list_displays(self) -> None:
        code, out, _ = self.run_cli("--list-displays")
        self.assertEqual(code, 0)
        self.assertIn("ssd1306_128x64 (128x64px, SSD1306)", out)


class TestJobBuilder(_ImageFiles):
    def test_frame_table_needs_two_images(self) -> None:
        builder = BitmapJobBuilder(ConversionSettings(frame_table="fade"))
        with self.assertRaises(ValueError):
            builder.build_from_files([self.checker])

    def test_single_has_no_frames(self) -> None:
        output = BitmapJobBuilder().build_from_files([self.checker])
        self.assertEqual(output.bitmaps, [])

    def test_blend_crops_to_shared_size(self) -> None:
        builder = BitmapJobBuilder(ConversionSettings(frame_count=2))
        output = builder.build_from_files([self.white, self.black])
        self.assertEqual([(b.width, b.height) for b in output.bitmaps], [(16, 4), (16, 4)])
        self.assertEqual(output.bitmaps[0].data, bytes(8))
        self.assertEqual(output.bitmaps[1].data, bytes([0xFF] * 8))


if __name__ == "__main__":
    unittest.main()
