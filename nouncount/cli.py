"""
Command-line interface for nouncount.

- parse: show the segments of a single sentence
- count: count noun phrases across plain-text files
"""
import argparse
import json
import logging
import sys

from tqdm import tqdm

from nouncount.dictionary import Dictionary
from nouncount.logging_config import setup_logging
from nouncount.parser import Sentence
from nouncount.trace import ParseTrace

logger = logging.getLogger(__name__)


def _read_file(path):
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def cmd_parse(args):
    """Parse one sentence into segments."""
    if args.text is not None:
        text = args.text
    elif args.file:
        try:
            text = _read_file(args.file).strip()
        except OSError as e:
            print(f"ERROR: {e}", file=sys.stderr)
            if args.trace:
                trace = ParseTrace(args.file)
                trace.set_error(str(e))
                print(trace.to_json())
            return 1
    else:
        text = sys.stdin.readline().strip()

    trace = ParseTrace(text) if args.trace else None
    sentence = Sentence(text, trace=trace)

    if args.format == 'json':
        print(json.dumps([s.to_dict() for s in sentence.segments], indent=2, ensure_ascii=False))
    else:
        for segment in sentence.segments:
            print(f"{segment.kind.name}: {segment}")

    if trace is not None:
        print(trace.to_json())

    return 0


def cmd_count(args):
    """Count noun phrases in text files (or stdin), one paragraph per line."""
    paragraphs = []
    if args.files:
        for path in args.files:
            try:
                paragraphs.extend(_read_file(path).splitlines())
            except OSError as e:
                print(f"ERROR: {e}", file=sys.stderr)
                return 1
    else:
        paragraphs = sys.stdin.read().splitlines()

    paragraphs = [p for p in paragraphs if p.strip()]
    logger.info(f"Counting noun phrases in {len(paragraphs)} paragraph(s)")

    dictionary = Dictionary()
    for paragraph in tqdm(paragraphs, desc="Parsing paragraphs", disable=not args.progress):
        dictionary.add_paragraph(paragraph)

    occurrences = dictionary.most_common(args.top)

    if args.format == 'json':
        print(json.dumps(dict(occurrences), indent=2, ensure_ascii=False))
    else:
        for noun, count in occurrences:
            print(f"{count:6d}  {noun}")

    if args.output:
        dictionary.save(args.output)

    return 0


def build_parser():
    parser = argparse.ArgumentParser(
        prog='nouncount',
        description='Extract and count noun phrases with a rule-based English parser',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  nouncount parse "The dog barked at the mailman"
  nouncount parse --trace --format json "The dog barks when it rains"
  nouncount count article.txt --top 20
  cat article.txt | nouncount count --format json --output nouns.json
        """
    )
    parser.add_argument('--log-file', help='Also append log records to this file')
    parser.add_argument('--debug', action='store_true', help='Enable verbose debug logging')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # --- parse command ---
    parser_parse = subparsers.add_parser('parse', help='Parse one sentence into segments')
    parser_parse.add_argument('text', nargs='?', help='Sentence to parse')
    parser_parse.add_argument('-f', '--file', help='Read the sentence from a file')
    parser_parse.add_argument('--format', choices=['text', 'json'], default='text',
                              help='Output format (default: text)')
    parser_parse.add_argument('--trace', action='store_true', help='Print the rule applied to every word')
    parser_parse.set_defaults(func=cmd_parse)

    # --- count command ---
    parser_count = subparsers.add_parser('count', help='Count noun phrases in text files')
    parser_count.add_argument('files', nargs='*', help='Plain-text files (default: stdin)')
    parser_count.add_argument('--format', choices=['text', 'json'], default='text',
                              help='Output format (default: text)')
    parser_count.add_argument('--top', type=int, default=None, help='Only show the N most common')
    parser_count.add_argument('--progress', action='store_true', help='Show a progress bar')
    parser_count.add_argument('-o', '--output', help='Also save the table as JSON to this path')
    parser_count.set_defaults(func=cmd_count)

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not getattr(args, 'func', None):
        parser.print_help()
        return 1

    setup_logging(log_file=args.log_file, debug=args.debug)
    return args.func(args)


if __name__ == '__main__':
    sys.exit(main())
