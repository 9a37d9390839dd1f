from __future__ import annotations
import argparse, json, logging, sys, time
from spelling import TypoChecker, ConfigurationError, format_report
from spelling import config as CFG

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="typochecker", description="Report possible typos in a text file")
    p.add_argument("target", help="Text file to check")
    p.add_argument("-d", "--dictionary", default=CFG.DEFAULT_DICTIONARY_FILE, help="Word list, one word per line")
    p.add_argument("-k", "--keyword", default=None, help="Extra keyword list (same format)")
    p.add_argument("--min-len", type=int, default=CFG.MIN_WORD_LEN, help="Shortest word that is checked")
    p.add_argument("--distance", type=int, default=CFG.LEVENSHTEIN_DISTANCE, help="Edit distance for suggestions")
    p.add_argument("--json", action="store_true", help="Emit JSON rows")
    p.add_argument("--benchmark", action="store_true", help="Print elapsed time to stderr")
    p.add_argument("--verbose", action="store_true")
    return p

def main(argv: list[str] | None = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)

    if args.min_len < 1:
        p.error("--min-len must be >= 1")
    if args.distance < 1:
        p.error("--distance must be >= 1")
    if args.verbose:
        logging.basicConfig(level=logging.INFO)

    try:
        checker = TypoChecker(
            min_word_len=args.min_len,
            levenshtein_distance=args.distance,
            dictionary_file=args.dictionary,
            keyword_file=args.keyword,
        )
    except ConfigurationError as exc:
        print(f"typochecker: {exc}", file=sys.stderr)
        return 1

    t0 = time.perf_counter()
    try:
        found = checker.check_file(args.target)
    except OSError as exc:
        print(f"typochecker: cannot read {args.target!r}: {exc.strerror or exc}", file=sys.stderr)
        return 1
    elapsed = time.perf_counter() - t0

    if args.json:
        print(json.dumps([row.to_dict() for row in found], ensure_ascii=False, indent=2))
    else:
        sys.stdout.write(format_report(found))

    if args.benchmark:
        print(f"[benchmark] checked {args.target} in {elapsed:.3f}s "
              f"({len(found)} typos, {checker.cache_size} cached)", file=sys.stderr)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
