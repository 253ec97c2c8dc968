from __future__ import annotations
import argparse, json, sys
from shakesearch import Engine, LoadError, Mode
from shakesearch import config as CFG


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Shakespeare search CLI (Engine-backed)")
    p.add_argument("--corpus", default=CFG.DEFAULT_CORPUS_PATH, help="Complete works .txt")
    p.add_argument("--quotes", default=CFG.DEFAULT_QUOTES_PATH, help="Quote table .csv")
    p.add_argument("--mode", choices=[m.value for m in Mode], default=Mode.QUOTES.value,
                   help="quotes: whole-word quote search, context: substring search, both")
    p.add_argument("--repl", action="store_true", help="Interactive loop after init")
    p.add_argument("--q", default=None, help="Single query to run once")
    p.add_argument("--json", action="store_true", help="Emit JSON rows")
    p.add_argument("--verbose", action="store_true")

    args = p.parse_args(argv)

    eng = Engine()
    try:
        eng.load(args.corpus, args.quotes, verbose=args.verbose)
    except LoadError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    try:
        def run_query(q: str):
            rows = eng.search(q, args.mode)
            if args.json:
                print(json.dumps([r.to_dict() for r in rows], ensure_ascii=False, indent=2))
                return
            if not rows:
                print("(no matches)"); return
            for i, r in enumerate(rows, 1):
                if r.kind == "context":
                    print(f"{i:<3} ...{' '.join(r.context.split())}...")
                else:
                    print(f"{i:<3} {r.title:<28} {r.act_scene_line:<10} {r.player:<16} {r.quote}")

        if args.q:
            run_query(args.q)

        if args.repl:
            print("Type a query (empty line to exit).")
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
