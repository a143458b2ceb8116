from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from ..displays import DisplayRegistry
from ..job import DEFAULT_FRAME_COUNT, BitmapJobBuilder, ConversionSettings
from ..preview import save_preview_gif


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="epdbitmap",
        description="Convert images into 1-bit PROGMEM byte arrays for embedded displays.",
    )
    parser.add_argument(
        "images",
        nargs="*",
        metavar="IMAGE",
        help="One image to threshold, or two images to blend into dithered frames",
    )
    parser.add_argument(
        "--frames",
        type=int,
        help=f"Number of blend frames, at least 2 (default: {DEFAULT_FRAME_COUNT})",
    )
    parser.add_argument("--label", help="Name used for the array of a single image (default: file name)")
    parser.add_argument("-o", "--output", metavar="PATH", help="Write the source to PATH instead of stdout")
    parser.add_argument("--preview-gif", metavar="PATH", help="Save blend frames as an animated GIF")
    parser.add_argument("--preview-scale", type=int, default=1, help="Pixel scale of the preview GIF")
    parser.add_argument("--frame-table", metavar="NAME", help="Append a pointer table over the blend frames")
    parser.add_argument("--display", metavar="ID", help="Fail if the bitmap does not fit this display")
    parser.add_argument("--list-displays", action="store_true", help="List known displays and exit")
    return parser.parse_args(argv)


def list_displays() -> int:
    registry = DisplayRegistry.load()
    for profile in registry.profiles:
        print(f"{profile.display_id} ({profile.width}x{profile.height}px, {profile.controller})")
    return 0


def build_settings(args: argparse.Namespace) -> ConversionSettings:
    return ConversionSettings(
        frame_count=DEFAULT_FRAME_COUNT if args.frames is None else args.frames,
        label=args.label,
        frame_table=args.frame_table,
        display=args.display,
        preview_scale=max(1, args.preview_scale),
    )


def _blend_only_options(args: argparse.Namespace) -> List[str]:
    options = []
    if args.frames is not None:
        options.append("--frames")
    if args.frame_table:
        options.append("--frame-table")
    if args.preview_gif:
        options.append("--preview-gif")
    return options


def run_conversion(args: argparse.Namespace) -> int:
    settings = build_settings(args)
    builder = BitmapJobBuilder(settings)
    output = builder.build_from_files(args.images)
    if args.preview_gif:
        save_preview_gif(output.bitmaps, args.preview_gif, scale=settings.preview_scale)
    if args.output:
        with open(args.output, "w", encoding="utf-8", newline="\n") as handle:
            handle.write(output.artifact.text)
        print(f"Wrote {args.output}", file=sys.stderr)
    else:
        sys.stdout.write(output.artifact.text)
        if not output.artifact.text.endswith("\n"):
            sys.stdout.write("\n")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    if args.list_displays:
        return list_displays()
    if not args.images:
        print("Missing image path. Use --help for usage.", file=sys.stderr)
        return 2
    if len(args.images) > 2:
        print("Provide one image, or two images to blend. Use --help for usage.", file=sys.stderr)
        return 2
    if len(args.images) == 1:
        blend_only = _blend_only_options(args)
        if blend_only:
            print(", ".join(blend_only) + " need two images to blend.", file=sys.stderr)
            return 2
    try:
        return run_conversion(args)
    except Exception as exc:
        print(str(exc), file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
