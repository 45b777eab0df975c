#!/usr/bin/env python3
"""
Secret Shares CLI: Shamir's Secret Sharing with compact text shares.

Usage:
    cli.py split --message "secret" -n 5 -k 3 [--output ./shares/]
    cli.py split --file secret.key -n 5 -k 3 [--output ./shares/]
    cli.py recover --shares share_001.txt share_002.txt share_003.txt [--output secret.key]
    cli.py recover --share 103001... --share 103002... --share 103003...
    cli.py verify --shares share_001.txt share_002.txt share_003.txt
    cli.py inspect share_001.txt

Author: secret-shares contributors
Date: 2026-10-17
"""

import argparse
import logging
import os
import sys
from pathlib import Path

import secret_shares

logger = logging.getLogger('secret_shares.cli')


def save_shares(shares: list, output_dir: str) -> list:
    """
    Save individual shares to separate files.

    Creates: <output_dir>/share_001.txt, share_002.txt, etc.
    Each file contains exactly one share string.

    Returns list of file paths.
    """
    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)

    paths = []
    for i, share_str in enumerate(shares, 1):
        path = out / f"share_{i:03d}.txt"
        path.write_text(share_str + '\n')
        paths.append(str(path))

    return paths


def load_shares(paths: list) -> list:
    """Load shares from files. Each file contains one share string."""
    return [Path(p).read_text().strip() for p in paths]


def _missing_file(paths):
    for p in paths or []:
        if not os.path.exists(p):
            print(f"Error: file not found: {p}", file=sys.stderr)
            return True
    return False


def _collect_shares(args) -> list:
    shares = []
    if args.shares:
        shares.extend(load_shares(args.shares))
    if args.share:
        shares.extend(s.strip() for s in args.share)
    return shares


def cmd_split(args):
    """Split a secret into shares."""
    if args.message is not None:
        secret = args.message.encode('utf-8')
    elif args.file:
        if not os.path.exists(args.file):
            print(f"Error: file not found: {args.file}", file=sys.stderr)
            return 1
        secret = Path(args.file).read_bytes()
    else:
        secret = sys.stdin.buffer.read()

    n = args.shares
    k = args.threshold

    try:
        shares = secret_shares.split(secret, n, k)
    except ValueError as e:
        print(f"Split FAILED: {e}", file=sys.stderr)
        return 1

    logger.info("split %d bytes into %d shares (%d-of-%d)", len(secret), n, k, n)

    if args.output:
        paths = save_shares(shares, args.output)
        print(f"{len(paths)} shares saved to: {args.output}/")
        print(f"Need {k} of {n} shares to recover")
    else:
        for s in shares:
            print(s)

    return 0


def cmd_recover(args):
    """Recover a secret from shares."""
    if _missing_file(args.shares):
        return 1
    shares = _collect_shares(args)
    if not shares:
        print("Error: no shares provided", file=sys.stderr)
        return 1

    try:
        secret = secret_shares.recover(shares)
    except ValueError as e:
        print(f"Recovery FAILED: {e}", file=sys.stderr)
        return 1

    if args.output:
        Path(args.output).write_bytes(secret)
        print(f"Recovered {len(secret)} bytes, saved to: {args.output}")
        return 0

    # Try to print as text, fall back to hex
    try:
        print(secret.decode('utf-8'))
    except UnicodeDecodeError:
        print("(Binary secret, use --output to save to file)", file=sys.stderr)
        print(secret.hex())

    return 0


def cmd_verify(args):
    """Verify shares without recovering."""
    if _missing_file(args.shares):
        return 1
    result = secret_shares.verify_shares(_collect_shares(args))

    print(f"Valid:       {result['valid']}")
    print(f"Recoverable: {result['recoverable']}")
    print(f"Threshold:   {result['threshold']}")
    print(f"Shares:      {result['share_count']}")
    print(f"Indices:     {result['indices']}")

    if result['errors']:
        print("\nErrors:")
        for e in result['errors']:
            print(f"  {e}")

    return 0 if result['valid'] else 1


def cmd_inspect(args):
    """Show the header of a share."""
    text = args.share
    if os.path.exists(text):
        text = load_shares([text])[0]

    try:
        share = secret_shares.parse_share(text)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    info = share.to_dict()
    print(f"Index:       {info['index']}")
    print(f"Threshold:   {info['threshold']}")
    print(f"Chunk width: {info['byte_width']} bytes (prime {info['prime']})")
    print(f"Chunks:      {info['chunks']}")
    print(f"Secret size: {info['secret_size']} bytes")
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Secret Shares: Shamir\'s Secret Sharing with compact text shares.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Split a text secret (3-of-5) and print the shares
  %(prog)s split --message "The truth is here" -n 5 -k 3

  # Split a file (2-of-3) into share files
  %(prog)s split --file master.key -n 3 -k 2 --output ./shares/

  # Recover from 2 share files
  %(prog)s recover --shares shares/share_001.txt shares/share_003.txt

  # Verify shares are compatible
  %(prog)s verify --shares shares/share_001.txt shares/share_002.txt
        """
    )
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging')

    sub = parser.add_subparsers(dest='command', help='Command')

    # Split
    p_split = sub.add_parser('split', help='Split a secret into shares')
    p_split.add_argument('--message', '-m', help='Text secret')
    p_split.add_argument('--file', '-f', help='File holding the secret')
    p_split.add_argument('--shares', '-n', type=int, required=True, help='Total shares (N)')
    p_split.add_argument('--threshold', '-k', type=int, required=True, help='Threshold to recover (K)')
    p_split.add_argument('--output', '-o', help='Directory for share files (default: print)')

    # Recover
    p_recover = sub.add_parser('recover', help='Recover a secret from shares')
    p_recover.add_argument('--shares', '-s', nargs='+', help='Share files')
    p_recover.add_argument('--share', '-S', action='append', help='Share string (repeatable)')
    p_recover.add_argument('--output', '-o', help='Output file (default: print to stdout)')

    # Verify
    p_verify = sub.add_parser('verify', help='Verify shares without recovering')
    p_verify.add_argument('--shares', '-s', nargs='+', help='Share files')
    p_verify.add_argument('--share', '-S', action='append', help='Share string (repeatable)')

    # Inspect
    p_inspect = sub.add_parser('inspect', help='Show the header of a share')
    p_inspect.add_argument('share', help='Share string or share file')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    if not args.command:
        parser.print_help()
        return 1

    handlers = {
        'split': cmd_split,
        'recover': cmd_recover,
        'verify': cmd_verify,
        'inspect': cmd_inspect,
    }

    return handlers[args.command](args)


if __name__ == '__main__':
    sys.exit(main())
