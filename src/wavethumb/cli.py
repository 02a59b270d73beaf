"""CLI entry point for wavethumb."""
import click

from .colors import hex_to_rgb
from .errors import InvalidConfigError, WavethumbError
from .renderer import (
    DEFAULT_BG_COLOR,
    DEFAULT_FG_COLOR,
    DEFAULT_HEIGHT,
    DEFAULT_OUTPUT,
    DEFAULT_WIDTH,
    render_thumbnail,
)


def validate_color(ctx, param, value):
    """Reject malformed colors before any audio is read."""
    try:
        hex_to_rgb(value)
    except InvalidConfigError as e:
        raise click.BadParameter(str(e)) from e
    return value


@click.command(help='Generate image thumbnails for audio files')
@click.option('-i', '--input', 'input_audio', required=True, type=click.Path(exists=True, dir_okay=False), help='Input file path')
@click.option('-o', '--output', 'output_image', default=DEFAULT_OUTPUT, show_default=True, help='Output file path')
@click.option('-w', '--width', default=DEFAULT_WIDTH, type=click.IntRange(min=1), show_default=True, help='Output image width (in pixels)')
@click.option('-h', '--height', default=DEFAULT_HEIGHT, type=click.IntRange(min=1), show_default=True, help='Output image height (in pixels)')
@click.option('--fg-color', default=DEFAULT_FG_COLOR, callback=validate_color, show_default=True, help='Foreground color (#RRGGBB)')
@click.option('--bg-color', default=DEFAULT_BG_COLOR, callback=validate_color, show_default=True, help='Background color (#RRGGBB)')
@click.option('-q', '--quiet', is_flag=True, help='Only print errors')
def main(input_audio, output_image, width, height, fg_color, bg_color, quiet):
    """Generate a waveform thumbnail from an audio file."""
    def progress(msg):
        click.echo(msg)

    if not quiet:
        click.echo(f"Input: {input_audio}")
        click.echo(f"Output: {output_image}")
        click.echo(f"Resolution: {width}x{height}, colors: {fg_color} on {bg_color}")

    try:
        render_thumbnail(
            input_audio=input_audio,
            output_image=output_image,
            width=width,
            height=height,
            fg_color=fg_color,
            bg_color=bg_color,
            progress_callback=None if quiet else progress
        )
    except WavethumbError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    if not quiet:
        click.echo(f"Thumbnail saved to {output_image}")


if __name__ == '__main__':
    main()
