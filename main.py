"""
Command-line entry point: JSON graph definition in, DOT document out.
"""
import argparse
import copy
import logging
import logging.config
from pathlib import Path
from typing import List, Optional
import sys

from config.settings import Settings
from export.loader import load_definition, build_graph
from export.writer import write_dot
from exceptions import DotGraphError


# Configure logging
LOGGING_CONFIG = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'detailed': {
            'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            'datefmt': '%Y-%m-%d %H:%M:%S'
        }
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'level': 'INFO',
            'formatter': 'detailed',
            'stream': 'ext://sys.stderr'
        },
        'file': {
            'class': 'logging.handlers.RotatingFileHandler',
            'filename': 'dotgraph.log',
            'maxBytes': 10485760,  # 10MB
            'backupCount': 5,
            'level': 'DEBUG',
            'formatter': 'detailed'
        }
    },
    'root': {
        'level': 'DEBUG',
        'handlers': ['console', 'file']
    }
}


def setup_logging(config: Settings) -> None:
    """Configure logging based on settings."""
    logging_config = copy.deepcopy(LOGGING_CONFIG)

    if config.log_file:
        logging_config['handlers']['file']['filename'] = str(config.log_file)
    else:
        del logging_config['handlers']['file']
        logging_config['root']['handlers'] = ['console']

    logging_config['root']['level'] = config.log_level
    logging.config.dictConfig(logging_config)


logger = logging.getLogger(__name__)


def run(
    definition_path: str,
    output: Optional[str] = None,
    to_stdout: bool = False,
    config: Optional[Settings] = None,
    graph_name: Optional[str] = None
) -> str:
    """
    Load a definition, build the graph and emit the DOT document.

    Args:
        definition_path: Path to JSON graph definition
        output: Output file; defaults to ``<output_dir>/<graph name>.dot``
        to_stdout: Return the document without writing a file
        config: Optional configuration (defaults to environment)
        graph_name: Overrides the name from the definition and settings

    Returns:
        The rendered document when ``to_stdout`` is set, else the written path

    Raises:
        DotGraphError: If loading, building or writing fails
    """
    if config is None:
        config = Settings()

    definition = load_definition(definition_path)
    graph = build_graph(
        definition,
        default_name=config.graph_name,
        default_kind=config.graph_kind,
        indent=config.indent,
        graph_name=graph_name
    )

    if to_stdout:
        return graph.render()

    if output is None:
        output = str(config.output_dir / f"{graph.name}.dot")

    return str(write_dot(graph, output))


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="dotgraph",
        description="Render a JSON graph definition as a DOT document",
    )

    parser.add_argument(
        "definition",
        help="Path to the JSON graph definition",
    )

    parser.add_argument(
        "--output",
        "-o",
        type=str,
        help="Write the DOT document to this path (default: <output_dir>/<graph name>.dot)",
    )

    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the DOT document instead of writing a file",
    )

    parser.add_argument(
        "--name",
        "-n",
        type=str,
        help="Graph name, overriding the definition and DOTGRAPH_GRAPH_NAME",
    )

    return parser.parse_args(args)


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point; returns the process exit code."""
    args = parse_args(argv)

    try:
        config = Settings()
    except Exception as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    try:
        config.validate_paths(output=False)
        setup_logging(config)
    except (OSError, ValueError) as e:
        print(f"Logging setup failed: {e}", file=sys.stderr)
        return 1

    try:
        result = run(
            args.definition,
            output=args.output,
            to_stdout=args.stdout,
            config=config,
            graph_name=args.name
        )
    except DotGraphError as e:
        logger.error(f"Failed to build graph: {e}")
        return 1

    if args.stdout:
        sys.stdout.write(result)
    else:
        logger.info(f"DOT document written to {Path(result)}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
