import argparse
import time

from ExampleSceneDef import SingleSphereExample

DEFAULT_CANVAS_SIZE = 1000


def render(canvas_size, output_path, verbose=True):
    """Render the default single-sphere scene to a square PPM file.

    Parameters:
      canvas_size : int -- width and height of the image in pixels
      output_path : str -- where to write the PPM text
    """
    start_time = time.time()
    SingleSphereExample().render(output_path=output_path, canvas_size=canvas_size, verbose=verbose)
    if verbose:
        print(f"Wrote {output_path} in {time.time() - start_time:.2f} seconds.")


def positive_int(text):
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError('must be a positive integer, got %s' % text)
    return value


def build_parser():
    parser = argparse.ArgumentParser(description='Render a single Phong-shaded sphere to a PPM image')
    parser.add_argument('-f', '--filename', required=True, metavar='FILE', help='Output PPM file')
    parser.add_argument('-s', '--size', type=positive_int, default=DEFAULT_CANVAS_SIZE,
                        help='Image width and height in pixels')
    parser.add_argument('-q', '--quiet', action='store_true', help='Do not print progress')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    render(args.size, args.filename, verbose=not args.quiet)


if __name__ == '__main__':
    main()
