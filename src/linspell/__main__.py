from __future__ import annotations
import argparse, json
from . import config as CFG
from .config import Settings
from .engine import Engine

def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="LinSpell CLI (linear-scan spelling correction)")
    g = p.add_mutually_exclusive_group(required=True)
    g.add_argument("--corpus", nargs="+", metavar="ROOT", help="Build word counts from *.txt under these folders/files")
    g.add_argument("--dictionary", metavar="FILE", help="Load a term/count table")

    p.add_argument("--term-index", type=int, default=CFG.TERM_INDEX, help="Column of the term in --dictionary")
    p.add_argument("--count-index", type=int, default=CFG.COUNT_INDEX, help="Column of the count in --dictionary")
    p.add_argument("-d", "--distance", type=int, default=CFG.EDIT_DISTANCE_MAX, help="Maximum edit distance")
    p.add_argument("-k", type=int, default=CFG.TOP_RESULTS_LIMIT, help="Top-K suggestions")
    p.add_argument("--maxlength", type=int, default=CFG.MAXLENGTH, help="Longest term considered (0 = no cap)")
    p.add_argument("--exhaustive", action="store_true", help="Measure every candidate (no early pruning)")
    p.add_argument("--q", default=None, help="Single word to look up")
    p.add_argument("--repl", action="store_true", help="Interactive loop after init")
    p.add_argument("--json", action="store_true", help="Emit JSON rows")
    p.add_argument("--save", default=None, metavar="FILE", help="Write the dictionary as a term/count table")
    p.add_argument("--verbose", action="store_true")

    args = p.parse_args(argv)

    try:
        settings = Settings(
            edit_distance_max=args.distance,
            top_results_limit=args.k,
            maxlength=args.maxlength,
            verbose=1 if args.exhaustive else 0,
        )
    except ValueError as exc:
        p.error(str(exc))

    eng = Engine(settings)
    try:
        try:
            if args.corpus:
                eng.build(args.corpus, verbose=args.verbose)
            else:
                eng.load(args.dictionary, term_index=args.term_index,
                         count_index=args.count_index, verbose=args.verbose)
        except (OSError, ValueError) as exc:
            p.error(f"could not build dictionary: {exc}")
        st = eng.stats()
        print(f"Dictionary: {st['terms']:,} terms (longest {st['longest']}, skipped {st['skipped']})")

        if args.save:
            eng.save(args.save)

        def run_query(q: str):
            rows = eng.lookup(q)
            if args.json:
                print(json.dumps([r.to_dict() for r in rows], ensure_ascii=False, indent=2))
            else:
                if not rows:
                    print("(no suggestions)"); return
                print("#  Dist  Count                 Term")
                for i, r in enumerate(rows, 1):
                    print(f"{i:<2} {r.distance:<5} {r.count:<21} {r.term}")

        if args.q:
            run_query(args.q)

        if args.repl:
            print("Type a word (empty line to exit).")
            while True:
                try:
                    q = input("> ").strip()
                except (EOFError, KeyboardInterrupt):
                    break
                if not q:
                    break
                run_query(q)

        return 0
    finally:
        eng.shutdown()

if __name__ == "__main__":
    raise SystemExit(main())
