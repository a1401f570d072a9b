#!/usr/bin/env python3
'''
Hide messages inside PNG files as extra chunks.

 $ pngstash encode image.png ruSt 'a secret message'
 $ pngstash decode image.png ruSt
 a secret message
 $ pngstash remove image.png ruSt
 $ pngstash print image.png

Set the DEBUG environment variable to have a verbose log.
'''
import argparse
import logging
import os
import sys

from .chunk_type import ChunkType
from .core import Chunk
from .exceptions import PNGStashException, ChunkNotFound
from .png import PNGFile


logger = logging.getLogger(__name__)


def read_png(path: str) -> PNGFile:
    with open(path, 'rb') as f:
        data = f.read()

    logger.debug('read %d bytes from \'%s\'', len(data), path)

    return PNGFile.parse(data)


def write_png(path: str, png: PNGFile) -> None:
    data = png.as_bytes()
    with open(path, 'wb') as f:
        f.write(data)

    logger.debug('wrote %d bytes to \'%s\'', len(data), path)


def cmd_encode(args: argparse.Namespace) -> None:
    png = read_png(args.file_path)
    chunk = Chunk(ChunkType.parse_str(args.chunk_type), args.message.encode('utf-8'))
    png.append_chunk(chunk)

    write_png(args.output_file or args.file_path, png)


def cmd_decode(args: argparse.Namespace) -> None:
    png = read_png(args.file_path)
    chunk = png.chunk_by_type(args.chunk_type)
    if chunk is None:
        raise ChunkNotFound(args.chunk_type)

    print(chunk.data_as_string())


def cmd_remove(args: argparse.Namespace) -> None:
    png = read_png(args.file_path)
    png.remove_chunk(args.chunk_type)

    write_png(args.file_path, png)


def cmd_print(args: argparse.Namespace) -> None:
    png = read_png(args.file_path)

    print(png)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='pngstash', description='Hide messages inside PNG files')
    subparsers = parser.add_subparsers(dest='command', required=True)

    encode = subparsers.add_parser('encode', help='Encodes a message into a PNG file')
    encode.add_argument('file_path')
    encode.add_argument('chunk_type')
    encode.add_argument('message')
    encode.add_argument('output_file', nargs='?', default=None)
    encode.set_defaults(func=cmd_encode)

    decode = subparsers.add_parser('decode', help='Decodes a message from a PNG file')
    decode.add_argument('file_path')
    decode.add_argument('chunk_type')
    decode.set_defaults(func=cmd_decode)

    remove = subparsers.add_parser('remove', help='Removes a chunk type from a PNG file')
    remove.add_argument('file_path')
    remove.add_argument('chunk_type')
    remove.set_defaults(func=cmd_remove)

    dump = subparsers.add_parser('print', help='Prints the PNG header and chunks')
    dump.add_argument('file_path')
    dump.set_defaults(func=cmd_print)

    return parser


def main(argv=None) -> int:
    logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)

    args = build_parser().parse_args(argv)

    try:
        args.func(args)
    except (PNGStashException, OSError, UnicodeEncodeError) as e:
        logger.debug('command \'%s\' failed (chain=%s)', args.command, getattr(e, 'chain', None), exc_info=True)
        print(f'error: {e}', file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
