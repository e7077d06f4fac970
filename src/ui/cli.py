"""CLI shell covering Load → Augment → Export for parsed training data."""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Dict, List

from common.config import DEFAULT_PROFILE, load_runtime_config
from common.diagnostics import DiagnosticCollector, DiagnosticLogger
from common.errors import BackendError
from common.models import RuntimeConfig
from core.augment import Augment
from core.augment.permutation import count_variants
from storage import load_parsed_data, save_augmented_data, write_training_table


def load_runtime(args: argparse.Namespace) -> RuntimeConfig:
    overrides: Dict[str, Dict[str, Any]] = {"global": {}, "profile": {}}
    if getattr(args, "format", None):
        overrides["global"]["output_format"] = args.format
    if getattr(args, "use_synonyms", False):
        overrides["profile"]["use_synonyms_in_entity_value_provider"] = True
    if getattr(args, "max_variants", None) is not None:
        overrides["profile"]["max_variants_per_sentence"] = args.max_variants
    config_path = Path(args.config) if getattr(args, "config", None) else None
    return load_runtime_config(args.profile, config_path=config_path, overrides=overrides)


def command_augment(args: argparse.Namespace) -> None:
    runtime = load_runtime(args)
    input_path = Path(args.input)
    parsed = load_parsed_data(input_path, encoding=runtime.global_settings.encoding)

    diagnostics_log = Path(args.diagnostics_log) if args.diagnostics_log else None
    collector = DiagnosticCollector(DiagnosticLogger(diagnostics_log))
    augment = Augment.from_config(parsed, runtime, on_event=collector)
    print(
        f"[augment] {input_path} intents={len(augment.intents)} profile='{args.profile}' "
        f"(provider_synonyms={runtime.profile.use_synonyms_in_entity_value_provider}, "
        f"max_variants={runtime.profile.max_variants_per_sentence or 'unbounded'})"
    )

    output_path = Path(args.output)
    output_format = runtime.global_settings.output_format
    if output_format == "parquet":
        rows = write_training_table(augment.expand_intents(), output_path)
        print(f"[augment] Wrote {rows} sentence(s) to {output_path}")
    else:
        intents = augment.get_intents()
        save_augmented_data(parsed, intents, output_path, encoding=runtime.global_settings.encoding)
        total = sum(len(intent["data"]) for intent in intents.values())
        print(f"[augment] Wrote {len(intents)} intent(s), {total} sentence(s) to {output_path}")

    dropped = collector.count("empty_domain")
    truncated = collector.count("truncated")
    if dropped:
        print(f"[augment/warning] {dropped} required synonym(s) had no values; affected sentences were dropped")
    if truncated:
        print(f"[augment/warning] {truncated} sentence(s) truncated to the variant cap")


def load_input(args: argparse.Namespace, runtime: RuntimeConfig) -> Augment:
    parsed = load_parsed_data(Path(args.input), encoding=runtime.global_settings.encoding)
    return Augment.from_config(parsed, runtime)


def command_synonyms(args: argparse.Namespace) -> None:
    augment = load_input(args, load_runtime(args))
    for value in augment.get_synonyms(args.entity):
        print(value)


def command_entity(args: argparse.Namespace) -> None:
    augment = load_input(args, load_runtime(args))
    provider = augment.get_entity(args.name)
    for value in provider.values(args.variant):
        print(value)


def command_stats(args: argparse.Namespace) -> None:
    runtime = load_runtime(args)
    augment = load_input(args, runtime)
    cap = runtime.profile.max_variants_per_sentence
    for name, intent in augment.intents.items():
        counts = [count_variants(sentence, augment.get_synonyms) for sentence in intent.data]
        variants = sum(min(count, cap) if cap else count for count in counts)
        print(f"[stats] {name} sentences={len(intent.data)} variants={variants}")


def add_config_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--profile",
        default=DEFAULT_PROFILE,
        help="Configuration profile to use (encoding, provider synonyms, variant cap)",
    )
    parser.add_argument(
        "--config",
        help="Override path to the configuration JSON",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Expand synonym placeholders of parsed training data into plain sentences"
    )
    subparsers = parser.add_subparsers(dest="command")

    augment = subparsers.add_parser("augment", help="Expand every intent and write the result")
    augment.add_argument("input", help="Parsed data JSON (intents, entities, synonyms)")
    augment.add_argument(
        "--output",
        default="augmented.json",
        help="Destination JSON tree or Parquet table",
    )
    augment.add_argument(
        "--format",
        choices=["json", "parquet"],
        help="Output format (defaults to the configured global.output_format)",
    )
    add_config_arguments(augment)
    augment.add_argument(
        "--use-synonyms",
        action="store_true",
        help="Let entity value providers enumerate synonym values too",
    )
    augment.add_argument(
        "--max-variants",
        type=int,
        help="Keep at most this many variants per sentence (min 1)",
    )
    augment.add_argument(
        "--diagnostics-log",
        help="Optional JSONL file capturing dropped/truncated sentences",
    )
    augment.set_defaults(func=command_augment)

    synonyms = subparsers.add_parser("synonyms", help="List synonym values of an entity")
    synonyms.add_argument("input", help="Parsed data JSON")
    synonyms.add_argument("entity", help="Entity name")
    add_config_arguments(synonyms)
    synonyms.set_defaults(func=command_synonyms)

    entity = subparsers.add_parser("entity", help="List values served by an entity provider")
    entity.add_argument("input", help="Parsed data JSON")
    entity.add_argument("name", help="Entity name")
    entity.add_argument("--variant", help="Entity variant to list instead of the default values")
    add_config_arguments(entity)
    entity.add_argument(
        "--use-synonyms",
        action="store_true",
        help="Include synonym values after each entity value",
    )
    entity.set_defaults(func=command_entity)

    stats = subparsers.add_parser(
        "stats", help="Count sentences and expected variants per intent (capped by the profile)"
    )
    stats.add_argument("input", help="Parsed data JSON")
    add_config_arguments(stats)
    stats.set_defaults(func=command_stats)

    return parser


def main(argv: List[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        return
    try:
        args.func(args)
    except BackendError as exc:
        raise SystemExit(str(exc)) from exc


if __name__ == "__main__":
    main()
