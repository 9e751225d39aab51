import argparse
import sys

from pngmsg import commands
from pngmsg.errors import ChunkNotFoundError, ChunkTypeError, PngError, TextDecodeError


def build_parser():
    parser = argparse.ArgumentParser(prog='pngmsg', description='Hide messages in PNG files')
    sub = parser.add_subparsers(dest='command', required=True)

    p = sub.add_parser('encode', help='append a message chunk to a PNG file')
    p.add_argument('file_path')
    p.add_argument('chunk_type')
    p.add_argument('message')
    p.add_argument('-o', '--output', dest='out_path', help='write to another file instead of in place')

    p = sub.add_parser('decode', help='print the message stored in a chunk')
    p.add_argument('file_path')
    p.add_argument('chunk_type')

    p = sub.add_parser('remove', help='remove the first chunk of a type')
    p.add_argument('file_path')
    p.add_argument('chunk_type')
    p.add_argument('-o', '--output', dest='out_path', help='write to another file instead of in place')

    p = sub.add_parser('print', help='list all chunks of a PNG file')
    p.add_argument('file_path')

    return parser


def run(args):
    if args.command == 'encode':
        saved = commands.encode_file(args.file_path, args.chunk_type, args.message, args.out_path)
        print(f"Chunk {args.chunk_type} added and saved to {saved}")
    elif args.command == 'decode':
        message = commands.decode_file(args.file_path, args.chunk_type)
        print(f"Found chunk with type '{args.chunk_type}'")
        print(f"Message: {message}")
    elif args.command == 'remove':
        saved = commands.remove_file(args.file_path, args.chunk_type, args.out_path)
        print(f"Chunk {args.chunk_type} removed and saved to {saved}")
    elif args.command == 'print':
        print(commands.print_file(args.file_path))


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        run(args)
    except ChunkNotFoundError:
        print(f"Failed to find chunk with type '{args.chunk_type}'", file=sys.stderr)
        return 1
    except ChunkTypeError as e:
        print(f"A bad chunk type has been given: {e}", file=sys.stderr)
        return 1
    except TextDecodeError:
        print(f"Chunk '{args.chunk_type}' was found but its data is not UTF-8 text", file=sys.stderr)
        return 1
    except PngError as e:
        print(f"A bad PNG file has been given, the file may be corrupted: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Failed to access file '{e.filename}': {e.strerror}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
