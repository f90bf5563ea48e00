# --- START OF FILE main.py ---

import argparse
import json
import logging
import os
import sys
import time

from .parser import BlueprintParser
from .pin_property_parser import PinPropertyParser


def main(argv=None):
    """
    Entry point for the pin parser command line.
    Outputs decoded nodes (or a single pin with --pin) as JSON.
    """
    arg_parser = argparse.ArgumentParser(
        description="Decode the pins of Unreal Engine Blueprint text copied from the editor."
    )
    arg_parser.add_argument(
        "input_file",
        help="Path to the text file containing the copied Blueprint data ('-' reads stdin)."
    )
    arg_parser.add_argument(
        "-o", "--output",
        help="Optional output file path for JSON. If not specified, results are printed to stdout."
    )
    arg_parser.add_argument(
        "--pin",
        action="store_true",
        help="Treat the input as a single pin attribute list (the text inside CustomProperties Pin (...))."
    )
    arg_parser.add_argument(
        "--node-name",
        default="",
        help="Owning node name recorded on the pin in --pin mode."
    )
    arg_parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging during parsing."
    )
    args = arg_parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format='%(asctime)s %(levelname)s: %(message)s [%(name)s]',
        stream=sys.stderr,
    )
    logger = logging.getLogger("pin_parser")

    # --- Read Input ---
    try:
        if args.input_file == '-':
            blueprint_text = sys.stdin.read()
            input_filename = "<stdin>"
        else:
            with open(args.input_file, 'r', encoding='utf-8') as f:
                blueprint_text = f.read()
            input_filename = os.path.basename(args.input_file)
    except FileNotFoundError:
        print(f"Error: Input file not found: {args.input_file}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error reading file: {e}", file=sys.stderr)
        return 1

    # --- Parsing Phase ---
    start_time = time.time()
    if args.pin:
        pin = PinPropertyParser().parse(blueprint_text.strip(), args.node_name)
        result = pin.to_dict()
    else:
        parser = BlueprintParser()
        nodes = parser.parse(blueprint_text)
        result = {
            "source_name": input_filename,
            "stats": parser.stats,
            "nodes": [node.to_dict() for node in nodes],
        }
        if not nodes:
            logger.warning("Parsing resulted in no nodes.")
    logger.debug(f"Parsing completed in {time.time() - start_time:.2f} seconds")

    output = json.dumps(result, indent=2, ensure_ascii=False)

    # --- Output Result ---
    if args.output:
        try:
            with open(args.output, 'w', encoding='utf-8') as f:
                f.write(output)
        except OSError as e:
            print(f"Error writing output file: {e}", file=sys.stderr)
            return 1
        print(f"Decoded pins written to {args.output}", file=sys.stderr)
    else:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
# --- END OF FILE main.py ---
