from __future__ import annotations

import unittest
from concurrent.futures import ThreadPoolExecutor

from epdbitmap.conversion import convert_dither_blend, convert_single
from epdbitmap.errors import EmptyImageError, InvalidFrameCountError, MissingInputError
from epdbitmap.imaging import RasterImage

from .helpers import BLACK, WHITE, from_pixels, solid


class TestConvertSingle(unittest.TestCase):
    def test_artifact_text(self) -> None:
        image = from_pixels(2, 2, [BLACK, WHITE, WHITE, BLACK])
        artifact = convert_single(image, "eye.bmp")
        self.assertEqual(
            artifact.text,
            "// 'eye', 2x2px\nconst unsigned char epd_bitmap_eye [] PROGMEM = {\n\t0x80, 0x40\n};",
        )

    def test_missing_image(self) -> None:
        with self.assertRaises(MissingInputError):
            convert_single(None, "eye.bmp")

    def test_empty_image(self) -> None:
        with self.assertRaises(EmptyImageError):
            convert_single(RasterImage(0, 0, ()), "empty.png")


class TestConvertDitherBlend(unittest.TestCase):
    def test_frames_and_artifact(self) -> None:
        result = convert_dither_blend(solid(8, 2, (0, 0, 0)), solid(9, 3, (255, 255, 255)), 3)
        self.assertEqual([frame.index for frame in result.frames], [0, 1, 2])
        self.assertEqual([frame.alpha for frame in result.frames], [0.0, 0.5, 1.0])
        self.assertEqual(result.bitmaps[0].data, bytes([0xFF, 0xFF]))
        self.assertEqual(result.bitmaps[-1].data, bytes([0x00, 0x00]))
        text = result.artifact.text
        self.assertTrue(text.startswith("// Dithered blend frame 1/3, 8x2px\n"))
        self.assertIn("// Dithered blend frame 3/3, 8x2px\n", text)
        self.assertEqual(text.count("PROGMEM"), 3)
        self.assertTrue(text.endswith("};\n\n"))

    def test_executor_keeps_order(self) -> None:
        img1 = RasterImage(5, 4, tuple((i * 12, i * 5, 255 - i * 9, 255) for i in range(20)))
        img2 = solid(5, 4, (200, 30, 90))
        sequential = convert_dither_blend(img1, img2, 6)
        with ThreadPoolExecutor(max_workers=3) as executor:
            parallel = convert_dither_blend(img1, img2, 6, executor=executor)
        self.assertEqual(parallel.artifact, sequential.artifact)
        self.assertEqual(parallel.frames, sequential.frames)

    def test_missing_second_image(self) -> None:
        with self.assertRaises(MissingInputError):
            convert_dither_blend(solid(1, 1, (0, 0, 0)), None, 3)

    def test_invalid_frame_count(self) -> None:
        image = solid(1, 1, (0, 0, 0))
        for count in (0, 1):
            with self.subTest(count=count):
                with self.assertRaises(InvalidFrameCountError):
                    convert_dither_blend(image, image, count)


if __name__ == "__main__":
    unittest.main()
