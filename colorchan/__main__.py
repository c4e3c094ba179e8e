"""colorchan — colour channel arithmetic and RGB / Y'CbCr conversion.

Usage: colorchan <command> <colour> [options]

Colours are written as comma-separated channel values in the storage
format's units (200,0,255 for uint8; 0.8,0,1 for float32), or as 8-bit hex
for RGB (#c800ff).

Environment variables / .env loading:
  COLORCHAN_MODEL, COLORCHAN_DTYPE and COLORCHAN_GAMUT set the defaults for
  --model, --dtype and --gamut. OS environment variables are always used
  first. Missing ones are read from --env-file, or from a .env file found
  walking up from the current directory to the nearest .git boundary.
"""

import argparse
import logging
import sys
from collections.abc import Callable

from colorchan import registry
from colorchan.core.angle import AngleUnit
from colorchan.core.env import Settings, load_env, load_settings
from colorchan.core.parse import parse_color, rgb_to_hex
from colorchan.core.report import format_json, format_text
from colorchan.core.rgb import Rgb
from colorchan.core.scalar import ScalarFormat
from colorchan.core.types import CommandResult
from colorchan.core.ycbcr import OutOfGamutMode, YCbCr

logger = logging.getLogger('colorchan')

_SPACES = {'rgb': Rgb, 'ycbcr': YCbCr}


def _build_parser() -> argparse.ArgumentParser:
    epilog = (
        'Examples:\n'
        '  colorchan chroma 200,150,100\n'
        '  colorchan hue 0.5,0.5,0 --dtype float32 --unit degrees\n'
        '  colorchan invert 200,0,255\n'
        '  colorchan lerp 100,200,0 200,0,255 --pos 0.5\n'
        "  colorchan to-ycbcr '#ff0000' --model jpeg\n"
        '  colorchan to-rgb 76,85,255 --gamut preserve --json\n'
        '  colorchan models\n'
    )
    parser = argparse.ArgumentParser(
        prog='colorchan',
        description="Colour channel arithmetic and RGB / Y'CbCr conversion.",
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging on stderr')
    sub = parser.add_subparsers(dest='command', help='Command to run')

    def colour_command(name: str, help: str, n_colours: int = 1) -> argparse.ArgumentParser:
        p = sub.add_parser(name, help=help)
        if n_colours == 1:
            p.add_argument('colour', help='Colour, e.g. 200,0,255 or #c800ff')
        else:
            p.add_argument('colours', nargs=n_colours, metavar='colour', help='Colours, e.g. 200,0,255')
        p.add_argument('-t', '--dtype', help='Channel storage dtype (default: $COLORCHAN_DTYPE or uint8)')
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
        return p

    colour_command('chroma', 'Chroma (max - min channel) of an RGB colour')

    p = colour_command('hue', 'Hue of an RGB colour')
    p.add_argument('-u', '--unit', default='degrees', help='turns, degrees or radians (default: degrees)')

    p = colour_command('invert', 'Invert every channel')
    p.add_argument('-s', '--space', choices=sorted(_SPACES), default='rgb', help='Colour space (default: rgb)')

    p = colour_command('lerp', 'Interpolate between two colours', n_colours=2)
    p.add_argument('-p', '--pos', type=float, default=0.5, help='Position in [0, 1] (default: 0.5)')
    p.add_argument('-s', '--space', choices=sorted(_SPACES), default='rgb', help='Colour space (default: rgb)')

    p = colour_command('to-ycbcr', "Convert RGB to Y'CbCr")
    p.add_argument('-m', '--model', help='Model name (default: $COLORCHAN_MODEL or bt601)')

    p = colour_command('to-rgb', "Convert Y'CbCr to RGB")
    p.add_argument('-m', '--model', help='Model name (default: $COLORCHAN_MODEL or bt601)')
    p.add_argument('-g', '--gamut', help='preserve or clip (default: $COLORCHAN_GAMUT or clip)')

    sub.add_parser('models', help="List the available Y'CbCr models")
    return parser


def _dtype(args: argparse.Namespace, settings: Settings) -> ScalarFormat:
    return ScalarFormat.of(args.dtype or settings.dtype)


def _cmd_chroma(args: argparse.Namespace, settings: Settings) -> CommandResult:
    fmt = _dtype(args, settings)
    colour = parse_color(args.colour, Rgb, fmt)
    result = CommandResult(command='chroma', dtype=fmt.name)
    result.add_input('rgb', colour)
    result.add_output('chroma', colour.get_chroma())
    return result


def _cmd_hue(args: argparse.Namespace, settings: Settings) -> CommandResult:
    fmt = _dtype(args, settings)
    unit = AngleUnit.parse(args.unit)
    colour = parse_color(args.colour, Rgb, fmt)
    result = CommandResult(command='hue', dtype=fmt.name)
    result.add_input('rgb', colour)
    result.add_output(f'hue_{unit.value}', colour.get_hue(unit))
    result.add_output('chroma', colour.get_chroma())
    return result


def _cmd_invert(args: argparse.Namespace, settings: Settings) -> CommandResult:
    fmt = _dtype(args, settings)
    colour = parse_color(args.colour, _SPACES[args.space], fmt)
    result = CommandResult(command='invert', dtype=fmt.name)
    result.add_input(args.space, colour)
    result.add_output('inverted', colour.invert())
    return result


def _cmd_lerp(args: argparse.Namespace, settings: Settings) -> CommandResult:
    fmt = _dtype(args, settings)
    cls = _SPACES[args.space]
    start, end = (parse_color(text, cls, fmt) for text in args.colours)
    result = CommandResult(command='lerp', dtype=fmt.name)
    result.add_input('start', start)
    result.add_input('end', end)
    result.add_input('pos', args.pos)
    result.add_output('lerp', start.lerp(end, args.pos))
    return result


def _cmd_to_ycbcr(args: argparse.Namespace, settings: Settings) -> CommandResult:
    fmt = _dtype(args, settings)
    spec = registry.get(args.model or settings.model)
    model = spec.for_format(fmt)
    colour = parse_color(args.colour, Rgb, fmt)
    result = CommandResult(command='to-ycbcr', dtype=fmt.name, model=spec.name)
    result.add_input('rgb', colour)
    result.add_output('ycbcr', YCbCr.from_rgb_and_model(colour, model).with_model(model))
    return result


def _cmd_to_rgb(args: argparse.Namespace, settings: Settings) -> CommandResult:
    fmt = _dtype(args, settings)
    spec = registry.get(args.model or settings.model)
    mode = OutOfGamutMode.parse(args.gamut or settings.gamut)
    colour = parse_color(args.colour, YCbCr, fmt)
    rgb = colour.to_rgb(spec.for_format(fmt), mode)
    result = CommandResult(command='to-rgb', dtype=fmt.name, model=spec.name)
    result.add_input('ycbcr', colour)
    result.add_input('gamut', mode.value)
    result.add_output('rgb', rgb)
    if rgb.is_normalized():
        result.add_output('hex', rgb_to_hex(rgb))
    return result


def _cmd_models(args: argparse.Namespace, settings: Settings) -> CommandResult:
    result = CommandResult(command='models')
    for name, spec in sorted(registry.all_models().items()):
        aliases = f' (aliases: {", ".join(spec.aliases)})' if spec.aliases else ''
        default = ' [default]' if name == registry.get(settings.model).name else ''
        result.add_output(name, f'Kr={spec.kr} Kb={spec.kb}  {spec.help}{aliases}{default}')
    return result


_COMMANDS: dict[str, Callable[[argparse.Namespace, Settings], CommandResult]] = {
    'chroma': _cmd_chroma,
    'hue': _cmd_hue,
    'invert': _cmd_invert,
    'lerp': _cmd_lerp,
    'to-ycbcr': _cmd_to_ycbcr,
    'to-rgb': _cmd_to_rgb,
    'models': _cmd_models,
}


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s %(name)s: %(message)s', stream=sys.stderr)

    # Load .env before reading settings; OS env vars always win
    env_path = load_env(env_file=args.env_file)
    if env_path:
        print(f'colorchan: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    settings = load_settings()
    logger.debug('Settings: %s', settings)

    try:
        result = _COMMANDS[args.command](args, settings)
    except (ValueError, TypeError) as exc:
        print(f'Error: {exc}', file=sys.stderr)
        sys.exit(1)
    except KeyError as exc:
        print(f'Error: {exc.args[0]}', file=sys.stderr)
        sys.exit(1)

    if getattr(args, 'json', False):
        print(format_json(result))
    else:
        print(format_text(result))


if __name__ == '__main__':
    main()
