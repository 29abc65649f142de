from __future__ import annotations
import argparse
from flask import Flask, request, jsonify, Response
from linspell.config import Settings, EDIT_DISTANCE_MAX, TOP_RESULTS_LIMIT, MAXLENGTH
from linspell.engine import Engine

app = Flask(__name__)
_engine: Engine | None = None

def _bad_request(msg: str):
    return jsonify({"error": msg}), 400

def _unavailable(msg: str):
    return jsonify({"error": msg}), 503

def _int_arg(name: str) -> int | None:
    """Optional integer query parameter; ValueError when present but not an integer."""
    raw = request.args.get(name)
    if raw is None or raw == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer (got {raw!r})") from None

def _current_engine() -> Engine:
    if _engine is None:
        raise RuntimeError("Engine not initialized. Call build() or load() first.")
    return _engine

# ---------- API ----------
@app.get("/api/lookup")
def api_lookup():
    q = request.args.get("q", "", type=str)
    try:
        d = _int_arg("d")
        k = _int_arg("k")
    except ValueError as exc:
        return _bad_request(str(exc))
    if not q.strip():
        return jsonify([])
    try:
        rows = _current_engine().lookup(q, edit_distance_max=d, top_k=k)
    except ValueError as exc:
        return _bad_request(str(exc))
    except RuntimeError as exc:
        return _unavailable(str(exc))
    return jsonify([r.to_dict() for r in rows])

@app.get("/api/correct")
def api_correct():
    q = request.args.get("q", "", type=str)
    try:
        correction = _current_engine().correct(q) if q.strip() else q
    except RuntimeError as exc:
        return _unavailable(str(exc))
    return jsonify({"input": q, "correction": correction})

@app.get("/health")
def health():
    stats = _engine.stats() if _engine else {"terms": 0}
    return jsonify({"ok": _engine is not None and _engine.dictionary is not None, **stats})

# ---------- UI ----------
@app.get("/")
def home():
    # A tiny SPA: CSS variables + minimal JS, no external deps.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>LinSpell • Flask UI</title>
<style>
:root{
  --bg:#0b0f14;
  --panel:#0f141b;
  --ink:#cfd8e3;
  --muted:#8a94a6;
  --accent:#6ee7ff;
  --accent-2:#22d3ee;
  --border:#1c2530;
}
*{box-sizing:border-box}
body{
  margin:0; background:var(--bg); color:var(--ink);
  font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,"Helvetica Neue",Arial;
}
.container{ max-width:760px; margin:24px auto; padding:0 16px; }
.card{
  background:var(--panel); border:1px solid var(--border);
  border-radius:16px; padding:18px; box-shadow:0 10px 30px rgba(0,0,0,.25);
}
h1{ font-size:20px; margin:0 0 8px 0; letter-spacing:.3px; }
.controls{ display:flex; gap:12px; align-items:center; margin:12px 0 4px 0; flex-wrap:wrap; }
.input{ position:relative; flex:1; min-width:220px; }
.input input{
  width:100%; padding:12px 14px; border-radius:12px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); outline:none; font-size:16px;
}
.input input:focus{ border-color:var(--accent) }
.badge{
  display:inline-flex; align-items:center; gap:8px;
  padding:10px 12px; border:1px solid var(--border); border-radius:12px;
  background:#0b1117; color:var(--muted);
}
.badge input{
  width:52px; background:transparent; border:none; color:var(--ink); font-size:15px;
  outline:none; text-align:center;
}
.meta{ color:var(--muted); font-size:13px; margin-top:6px; }
.err{
  display:none; margin-top:12px; padding:10px 12px; border-radius:10px;
  background:rgba(255,93,93,.12); border:1px solid rgba(255,93,93,.35); color:#ffb0b0;
}
.results{ margin-top:16px; border-radius:12px; border:1px solid var(--border); }
.row{
  display:grid; grid-template-columns:3rem 5rem 8rem 1fr; gap:10px;
  padding:12px 14px; border-top:1px solid var(--border);
}
.row:first-child{ border-top:none }
.head{ background:#0d131a; font-weight:600; color:var(--muted) }
.small{ color:var(--muted); font-variant-numeric:tabular-nums }
.mono{ font-family: ui-monospace, SFMono-Regular, Menlo, Monaco, Consolas, "Liberation Mono", monospace }
.empty{ padding:24px; text-align:center; color:var(--muted); }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>LinSpell spelling suggestions</h1>
      <div class="controls">
        <div class="input">
          <input id="q" type="text" placeholder="Type a word…" autocomplete="off" autofocus />
        </div>
        <div class="badge">Distance <input id="d" type="number" min="0" max="5" value="2" class="mono" /></div>
        <div class="badge">Top-K <input id="k" type="number" min="1" max="50" value="3" class="mono" /></div>
      </div>
      <div id="stats" class="meta">Ready.</div>
      <div id="err" class="err"></div>
      <div class="results">
        <div class="row head">
          <div>#</div><div>Distance</div><div>Count</div><div>Term</div>
        </div>
        <div id="out" class="empty">Start typing to see suggestions.</div>
      </div>
    </div>
  </div>

<script>
const $ = (sel) => document.querySelector(sel);
const q = $("#q"), d = $("#d"), k = $("#k"), out = $("#out"), err = $("#err"), stats = $("#stats");
let t; // debounce timer

async function search(){
  const word = q.value.trim();
  if(word.length === 0){
    out.className = "empty";
    out.innerHTML = "Start typing to see suggestions.";
    stats.textContent = "Ready.";
    err.style.display = "none";
    return;
  }
  err.style.display = "none";
  const t0 = performance.now();
  try{
    const resp = await fetch(`/api/lookup?q=${encodeURIComponent(word)}&d=${d.value}&k=${k.value}`);
    const data = await resp.json();
    if(!resp.ok) throw new Error(data.error ?? `HTTP ${resp.status}`);
    const dt = Math.max(1, Math.round(performance.now() - t0));
    stats.textContent = `Suggestions: ${data.length} • ~${dt} ms`;
    if(data.length === 0){
      out.className = "empty";
      out.innerHTML = "No suggestions.";
      return;
    }
    out.className = "";
    out.innerHTML = data.map((r,i)=>`
        <div class="row">
          <div class="small">${i+1}</div>
          <div class="small mono">${r.distance}</div>
          <div class="small mono">${r.count}</div>
          <div>${r.term}</div>
        </div>`).join("");
  }catch(e){
    err.style.display = "block";
    err.textContent = `Error: ${e.message ?? e}`;
    stats.textContent = "Error.";
  }
}

function debouncedSearch(){
  clearTimeout(t);
  t = setTimeout(search, 150);
}

q.addEventListener("input", debouncedSearch);
d.addEventListener("change", debouncedSearch);
k.addEventListener("change", debouncedSearch);
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of Engine")
    mode = ap.add_mutually_exclusive_group(required=True)
    mode.add_argument("--corpus", nargs="+", metavar="ROOT")
    mode.add_argument("--dictionary", metavar="FILE")
    ap.add_argument("--term-index", type=int, default=0)
    ap.add_argument("--count-index", type=int, default=1)
    ap.add_argument("-d", "--distance", type=int, default=EDIT_DISTANCE_MAX)
    ap.add_argument("-k", type=int, default=TOP_RESULTS_LIMIT)
    ap.add_argument("--maxlength", type=int, default=MAXLENGTH)
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _engine
    _engine = Engine(Settings(edit_distance_max=args.distance, top_results_limit=args.k,
                              maxlength=args.maxlength))
    if args.corpus:
        _engine.build(args.corpus, verbose=args.verbose)
    else:
        _engine.load(args.dictionary, term_index=args.term_index,
                     count_index=args.count_index, verbose=args.verbose)

    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
