"""
BlurHash Studio
Encode images into blurhash placeholders and decode them back into previews.
"""

import sys
import warnings

warnings.filterwarnings('ignore', category=RuntimeWarning)


USAGE = """Usage: python main.py encode <image_path> [components_x] [components_y]
       python main.py decode <blurhash> <width> <height> <output_path> [punch]
       python main.py preview <image_path> [components_x] [components_y]
       python main.py preview --synthetic [components_x] [components_y]"""


def _component_args(args):
    components_x = int(args[0]) if len(args) > 0 else 4
    components_y = int(args[1]) if len(args) > 1 else components_x
    return components_x, components_y


def run_encode(args):
    """Print the blurhash of an image file."""
    from engines.pipeline import blurhash_encode
    from utils.image_io import load_image, shrink_to_max_side

    image = load_image(args[0])
    components_x, components_y = _component_args(args[1:])
    image = shrink_to_max_side(image, 64)
    print(blurhash_encode(image, components_x, components_y))


def run_decode(args):
    """Decode a blurhash into an image file."""
    from engines.pipeline import blurhash_decode
    from utils.image_io import save_image

    if len(args) < 4:
        raise ValueError("decode needs <blurhash> <width> <height> <output_path>")
    blurhash, width, height, output_path = args[0], int(args[1]), int(args[2]), args[3]
    punch = float(args[4]) if len(args) > 4 else 1.0

    preview = blurhash_decode(blurhash, (width, height), punch)
    save_image(preview, output_path)
    print(f"Saved: {output_path} ({width}x{height})")


def run_preview(args):
    """Encode, decode and report preview quality."""
    from models.blurhash_params import BlurHashParams
    from engines.pipeline import encode_preview
    from utils.test_images import generate_demo_image
    from utils.image_io import load_image, save_image

    if args[0] == '--synthetic':
        print("Generating test image...")
        image = generate_demo_image("gradient")
    else:
        print(f"Loading: {args[0]}")
        image = load_image(args[0])
    components_x, components_y = _component_args(args[1:])

    print(f"Image: {image.shape[1]}x{image.shape[0]}")
    print(f"Components: {components_x}x{components_y}")

    params = BlurHashParams(
        components_x=components_x,
        components_y=components_y,
        max_side=64
    )

    result = encode_preview(image, params)

    print("\n=== Results ===")
    print(f"BlurHash:  {result.blurhash}")
    print(f"Length:    {result.hash_length} chars")
    print(f"PSNR:      {result.psnr_rgb:.2f} dB")
    print(f"SSIM:      {result.ssim_rgb:.4f}")
    print(f"Ratio:     {result.compression_ratio:.1f}:1")
    print(f"Time:      {result.encode_time_ms + result.decode_time_ms:.2f} ms")

    save_image(result.preview_image, "preview.png")
    print("\nSaved: preview.png")


def main():
    commands = {
        'encode': run_encode,
        'decode': run_decode,
        'preview': run_preview,
    }

    if len(sys.argv) < 3 or sys.argv[1] not in commands:
        print(USAGE)
        sys.exit(0)

    try:
        commands[sys.argv[1]](sys.argv[2:])
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
