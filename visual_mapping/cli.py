"""
    Command-line interface: render a graph document or print the legend.

        graph-visual-mapping render graph.json --graph-type node-link --theme dark
        graph-visual-mapping legend --theme light

    Output is the JSON-safe render result on stdout.  Invalid input
    documents are reported on stderr with exit status 1.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional

from mapping_api.types import GraphType, Theme

from .config import EngineConfig, load_mapping_config, load_settings
from .engine import VisualMappingEngine
from .services.exceptions import GraphDataError, MappingConfigError
from .services.serialization_service import GraphSerializer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="graph-visual-mapping",
        description="Map weighted graphs to renderer-specific visual records",
    )
    parser.add_argument("--config", type=Path, help="mapping config file (json)")
    parser.add_argument("--settings", type=Path, help="UI settings file (json)")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation")

    subparsers = parser.add_subparsers(dest="command", required=True)

    render = subparsers.add_parser("render", help="render a graph document")
    render.add_argument("graph", type=Path, help="graph data file (json)")
    render.add_argument("--graph-type", "-g",
                        help=f"backend ({', '.join(t.value for t in GraphType)}); "
                             "default from settings")
    render.add_argument("--theme", "-t", choices=[t.value for t in Theme],
                        help="theme; default from settings")

    legend = subparsers.add_parser("legend", help="print the color legend")
    legend.add_argument("--theme", "-t", choices=[t.value for t in Theme])

    return parser


def parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(list(argv) if argv is not None else None)


def run_cli(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        config = EngineConfig(
            mapping=load_mapping_config(args.config),
            settings=load_settings(args.settings),
        )
        engine = VisualMappingEngine(config)

        if args.command == "legend":
            payload = [cell.to_dict() for cell in engine.legend(args.theme)]
        else:
            graph = GraphSerializer().load(args.graph)
            payload = engine.render_json(graph, graph_type=args.graph_type, theme=args.theme)
    except (GraphDataError, MappingConfigError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(payload, indent=args.indent, ensure_ascii=False))
    return 0


def main() -> None:
    sys.exit(run_cli())


if __name__ == "__main__":
    main()
