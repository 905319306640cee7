#!/usr/bin/env python3
"""
Symptom Smart: Interactive symptom tag console

Drives the tag input controller from the terminal: type symptoms, answer
spell-check prompts, remove tags with "-name".

Run:
    python scripts/tag_console.py
    python scripts/tag_console.py --config config.yaml
"""

import sys
import argparse
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from symptom_smart.config import get_default_config, load_config
from symptom_smart.tag_input import SubmitOutcome, TagInputController


def show_tags(tags):
    count = len(tags)
    print(f"   Tags: {', '.join(tags) if tags else '-'}")
    print(f"   {count} symptom{'' if count == 1 else 's'} added.")


def main():
    parser = argparse.ArgumentParser(description='Symptom Smart tag console')
    parser.add_argument('--config', default=None, help='YAML configuration file')
    args = parser.parse_args()

    settings = load_config(args.config) if args.config else get_default_config()
    controller = TagInputController(
        matcher=settings.matcher.build_matcher(),
        on_change=show_tags
    )

    print("=" * 60)
    print("Symptom Smart: Symptom tags")
    print("=" * 60)
    print("Type a symptom and press Enter ('-tag' removes, 'q' quits)")
    print(f"Add at least {settings.intake.min_symptoms} symptoms for analysis.\n")

    while True:
        try:
            text = input(">>> ")
        except (KeyboardInterrupt, EOFError):
            break

        if text.strip().lower() in ('q', 'quit', 'exit'):
            break

        if text.startswith("-"):
            controller.remove(text[1:].strip().lower())
            continue

        outcome = controller.submit(text)

        if outcome == SubmitOutcome.DUPLICATE:
            print("   Already added.")
        elif outcome == SubmitOutcome.SUGGESTED:
            pending = controller.pending_suggestion
            try:
                answer = input(
                    f'   Did you mean "{pending.suggested}" instead of "{pending.original}"? (y/n): '
                ).strip().lower()
            except (KeyboardInterrupt, EOFError):
                break
            if answer == 'y':
                controller.accept_suggestion()
            else:
                controller.keep_original()

    print(f"\nFinal symptoms: {controller.tags}")


if __name__ == "__main__":
    main()
