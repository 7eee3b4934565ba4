#!/usr/bin/python3

import argparse
import logging
import sys

from .macaddress import parse


log = logging.getLogger('mackind')


RENDERINGS = {
    'plain': 'to_plain_notation',
    'hyphen': 'to_hyphen_notation',
    'colon': 'to_colon_notation',
    'dot': 'to_dot_notation',
    }


def describe(mac):
    """Return text info on a MAC address."""
    oui, nic = mac.to_fragments()
    return 'Plain: {:s}\n' \
           'Hyphen: {:s}\n' \
           'Colon: {:s}\n' \
           'Dot: {:s}\n' \
           'Binary: {:s}\n' \
           'Decimal: {:d}\n' \
           'Fragments: {:06x} {:06x}\n' \
           'Kind: {:s}\n' \
           'OUI: {}\n' \
           'CID: {}\n' \
           'Broadcast: {}\n' \
           'Multicast: {}\n' \
           'Unicast: {}\n' \
           'UAA: {}\n' \
           'LAA: {}'.format(
               mac.to_plain_notation(),
               mac.to_hyphen_notation(),
               mac.to_colon_notation(),
               mac.to_dot_notation(),
               mac.to_binary_representation(),
               mac.to_decimal_representation(),
               oui, nic,
               str(mac.kind()),
               mac.has_oui(),
               mac.has_cid(),
               mac.is_broadcast(),
               mac.is_multicast(),
               mac.is_unicast(),
               mac.is_uaa(),
               mac.is_laa())


def build_parser():
    parser = argparse.ArgumentParser(
        prog='mackind',
        description='Parse and classify 48-bit MAC addresses.')
    parser.add_argument('addresses', metavar='ADDRESS', nargs='+',
                        help='address in plain, hyphen, colon or dot notation')
    parser.add_argument('--notation', choices=sorted(RENDERINGS),
                        help='only print the address in this notation')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='log parse rejections')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(name)s: %(message)s',
        stream=sys.stderr,
        )

    status = 0
    for address in args.addresses:
        result = parse(address)
        if not result.ok:
            print('{}: {}'.format(address, result.error), file=sys.stderr)
            status = 1
            continue
        mac = result.address
        if args.notation:
            print(getattr(mac, RENDERINGS[args.notation])())
        else:
            log.info('parsed %s', mac)
            print(describe(mac))
    return status


if __name__ == '__main__':
    sys.exit(main())
