# main.py
import argparse
import json
import logging
import sys
from pathlib import Path

from mdl_parser.constants import ModelQuality
from mdl_parser.parser import ModelDefinition, MemoryModelFile
from mdl_parser.structs import FormatError
from mdl_parser.utils.logging import setup_logging

logger = logging.getLogger(__name__)

def dump_definition(definition_path: Path, formats_path: Path, path: str,
                    quality: ModelQuality = None) -> dict:
    """Decode extracted parts and return a JSON-ready summary."""
    model_file = MemoryModelFile.from_part_files(path, [formats_path, definition_path])
    definition = ModelDefinition(model_file)
    logger.info(f"Decoded {definition.header.mesh_count} meshes, "
                f"{len(definition.bones)} bones from {path}")

    result = definition.to_dict()
    if quality is not None:
        result['model'] = definition.get_model(quality).to_dict()
    return result

def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Decode an extracted model definition and print a summary'
    )
    parser.add_argument('definition',
                        help='File holding the definition part (part 1)')
    parser.add_argument('formats',
                        help='File holding the vertex format part (part 0)')
    parser.add_argument('--path',
                        help='Original model path, used to detect osg models '
                             '(default: definition file path)')
    parser.add_argument('--quality',
                        choices=[q.name.lower() for q in ModelQuality],
                        help='Also summarize the meshes of this quality')
    parser.add_argument('--output',
                        help='Write JSON to this file instead of stdout')
    parser.add_argument('--log-dir',
                        help='Directory for log files')
    parser.add_argument('--verbose', '-v',
                        action='store_true',
                        help='Enable verbose logging')

    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    setup_logging(args.log_dir, log_level)

    definition_path = Path(args.definition)
    formats_path = Path(args.formats)
    path = args.path or definition_path.as_posix()
    quality = ModelQuality[args.quality.upper()] if args.quality else None

    try:
        result = dump_definition(definition_path, formats_path, path, quality)
    except (FormatError, FileNotFoundError) as e:
        logger.error(f"Processing failed: {e}")
        return 1

    text = json.dumps(result, indent=2)
    if args.output:
        Path(args.output).write_text(text, encoding='utf-8')
        logger.info(f"Results written to {args.output}")
    else:
        print(text)

    return 0

if __name__ == "__main__":
    sys.exit(main())
