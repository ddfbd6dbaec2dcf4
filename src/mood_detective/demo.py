# src/mood_detective/demo.py
import argparse
import json
import sys

DEFAULT_TEXT = "I love this book, it's awesome!"


def _print_report(report) -> None:
    from .engine.orchestrator import format_probs

    rule, bayes = report["rulebook"], report["bayes"]
    print(f"\n“{report['text']}”")
    print(f"  Smiley Judge (Rulebook): {rule['label']}  score: {rule['score']:.2f}")
    if rule["explain"]:
        print(f"    clues: {', '.join(rule['explain'])}")
    print(f"  Robot Judge (Baby NB):   {bayes['label']}  {format_probs(bayes['probs'])}")
    print(f"  Judges {'agree' if report['agree'] else 'DISAGREE'}")


def main(argv=None):
    """CLI demo: run the rulebook and Naive Bayes judges on a sentence and show both verdicts."""
    from .engine.general.utils.log import enable_topics
    from .engine.orchestrator import compare_judges, judge_sentence

    parser = argparse.ArgumentParser(
        prog="mood-demo",
        description="Two judges guess the mood of a sentence: a rulebook and a baby Naive Bayes.",
    )
    parser.add_argument(
        "text",
        nargs="*",
        help=f"Sentence to analyze (e.g. {DEFAULT_TEXT})",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    parser.add_argument("--json", action="store_true", help="Print the raw report as JSON")
    parser.add_argument(
        "--compare",
        action="store_true",
        help="Judge the built-in compare sentences instead of TEXT",
    )

    args = parser.parse_args(argv)
    if args.debug:
        enable_topics("all")

    try:
        if args.compare:
            reports = compare_judges()
        else:
            reports = [judge_sentence(" ".join(args.text) or DEFAULT_TEXT)]

        if args.json:
            payload = reports if args.compare else reports[0]
            print(json.dumps(payload, indent=2, ensure_ascii=False))
        else:
            for report in reports:
                _print_report(report)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
