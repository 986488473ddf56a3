"""CLI interface for exifkit -- dump and roundtrip subcommands."""

import json
import sys

import click

import exifkit
from exifkit.config import DecodeConfig
from exifkit.errors import ExifError
from exifkit.image import build_app1_segment
from exifkit.log import (
    cli_entry,
    cli_error,
    cli_header,
    cli_info,
    cli_success,
    cli_warning,
    log_error,
    log_info,
    log_warn,
)
from exifkit.models import ExifData
from exifkit.reader import parse_buffer_quiet, parse_file
from exifkit.tiff.writer import JPEG_MIME


def _entry_json(entry) -> dict:
    return {
        'tag': entry.tag.name,
        'code': entry.code,
        'ifd': entry.kind.value,
        'format': entry.ifd.format.name,
        'count': entry.ifd.count,
        'value': str(entry.value),
        'unit': entry.unit,
        'readable': entry.value_more_readable,
    }


@click.group()
@click.version_option(version=exifkit.__version__, prog_name='exifkit')
def main():
    """exifkit -- read and re-encode EXIF metadata.

    Works on TIFF files and on JPEG files with an Exif APP1 segment.
    """
    pass


@main.command()
@click.argument('paths', nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option('--verbose', '-v', is_flag=True, help='Show IFD names and decoder warnings.')
@click.option('--json-out', type=click.Path(), help='Write decoded entries as JSON to file.')
@click.option('--config', 'config_path', type=click.Path(exists=True, dir_okay=False),
              help='JSON decoder settings.')
@click.option('--log', type=click.Path(), help='Write log to file.')
def dump(paths, verbose, json_out, config_path, log):
    """Print the EXIF tags of each file in PATHS."""
    if config_path:
        try:
            config = DecodeConfig.from_json(config_path)
        except ValueError as e:
            click.echo(cli_error(f'Error: invalid config {config_path}: {e}'), err=True)
            sys.exit(1)
    else:
        config = DecodeConfig.default()

    log_file = open(log, 'w') if log else None

    def log_line(line):
        if log_file:
            log_file.write(line + '\n')
            log_file.flush()

    errors = 0
    results_json = {}

    for path in paths:
        click.echo(cli_header(path))
        try:
            exif, warnings = parse_file(path, config)
        except ExifError as e:
            errors += 1
            click.echo(cli_error(f'  Error: {e.message}'))
            log_line(log_error(f'{path}: {e.message}'))
            results_json[path] = {'error': e.message, 'warnings': e.warnings}
            continue

        log_line(log_info(f'{path}: {len(exif.entries)} tag(s), {exif.mime}'))
        for entry in exif.entries:
            if verbose:
                unit = '' if entry.unit == 'none' or entry.unit.startswith('@') else entry.unit
                click.echo(cli_entry(str(entry.tag), entry.value_more_readable,
                                     entry.kind.value, unit))
            else:
                click.echo(cli_entry(str(entry.tag), entry.value_more_readable))
        for warning in warnings:
            log_line(log_warn(f'{path}: {warning}'))
            if verbose:
                click.echo(cli_warning(f'  Warning: {warning}'))

        results_json[path] = {
            'mime': exif.mime,
            'little_endian': exif.le,
            'entries': [_entry_json(e) for e in exif.entries],
            'warnings': warnings,
        }

    if json_out:
        with open(json_out, 'w') as f:
            json.dump(results_json, f, indent=2)
        click.echo(cli_info(f'Results written to {json_out}'))

    if log_file:
        log_file.close()

    if errors:
        sys.exit(1)


def _reparse(exif: ExifData, encoded: bytes) -> ExifData:
    if exif.mime == JPEG_MIME:
        encoded = build_app1_segment(encoded)
    return parse_buffer_quiet(encoded)[0]


@main.command()
@click.argument('paths', nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
def roundtrip(paths):
    """Re-encode each file's metadata and check it decodes back unchanged."""
    failures = 0
    for path in paths:
        try:
            first, _ = parse_file(path)
            encoded = first.serialize()
            second = _reparse(first, encoded)
            reencoded = second.serialize()
        except (ExifError, ValueError) as e:
            failures += 1
            click.echo(f'{path}: {cli_error("ERROR")} {e}')
            continue

        same_bytes = encoded == reencoded
        same_entries = first.entries == second.entries
        if same_bytes and same_entries:
            click.echo(f'{path}: {cli_success("OK")} ({len(encoded)} bytes, '
                       f'{len(first.entries)} tag(s))')
        else:
            failures += 1
            detail = []
            if not same_bytes:
                detail.append('encodings differ')
            if not same_entries:
                detail.append('decoded tags differ')
            click.echo(f'{path}: {cli_error("MISMATCH")} {", ".join(detail)}')

    if failures:
        sys.exit(1)


if __name__ == '__main__':
    main()
