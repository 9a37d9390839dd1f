from __future__ import annotations
import argparse
import logging
from flask import Flask, request, jsonify, Response
from spelling import TypoChecker
from spelling import config as CFG

app = Flask(__name__)
_checker: TypoChecker | None = None

def _request_text() -> str:
    if request.method == "POST":
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            return ""
        text = payload.get("text", "")
        return text if isinstance(text, str) else ""
    return request.args.get("text", "", type=str)

# ---------- API ----------
@app.route("/api/check", methods=["GET", "POST"])
def api_check():
    if _checker is None:
        return jsonify({"error": "checker not initialized"}), 503
    text = _request_text()
    if not text:
        return jsonify([])
    rows = _checker.check_text(text)
    return jsonify([r.to_dict() for r in rows])

@app.get("/api/health")
def api_health():
    if _checker is None:
        return jsonify({"ok": False, "error": "checker not initialized"}), 503
    return jsonify({"ok": True, "words": len(_checker.dictionary), "cached": _checker.cache_size})

# ---------- UI ----------
@app.get("/")
def home():
    # Single page, no external deps.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Typo Checker</title>
<style>
:root{ --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6; --accent:#6ee7ff; --border:#1c2530; }
*{box-sizing:border-box}
body{ margin:0; background:var(--bg); color:var(--ink); font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Arial; }
.container{ max-width:980px; margin:24px auto; padding:0 16px; }
.card{ background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px; }
h1{ font-size:20px; margin:0 0 8px 0; }
textarea{ width:100%; min-height:180px; padding:12px; border-radius:12px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); font:14px ui-monospace,Menlo,Consolas,monospace; }
textarea:focus{ outline:none; border-color:var(--accent) }
.btn{ margin-top:10px; padding:10px 14px; border-radius:10px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); cursor:pointer; }
.meta{ color:var(--muted); font-size:13px; margin-top:6px; }
.row{ padding:10px 14px; border-top:1px solid var(--border); }
.word{ color:var(--accent); font-weight:600 }
.small{ color:var(--muted); font-variant-numeric:tabular-nums }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Typo Checker</h1>
      <form id="f">
        <textarea id="text" placeholder="Paste text to check…"></textarea>
        <button class="btn" type="submit">Check</button>
      </form>
      <div id="stats" class="meta">Ready.</div>
      <div id="out"></div>
    </div>
  </div>
<script>
const f = document.querySelector("#f"), text = document.querySelector("#text");
const out = document.querySelector("#out"), stats = document.querySelector("#stats");
function esc(s){ return String(s).replace(/[&<>"]/g, c => ({"&":"&amp;","<":"&lt;",">":"&gt;",'"':"&quot;"}[c])); }
f.addEventListener("submit", async (ev) => {
  ev.preventDefault();
  const t0 = performance.now();
  try{
    const resp = await fetch("/api/check", {method:"POST", headers:{"Content-Type":"application/json"},
                                            body: JSON.stringify({text: text.value})});
    if(!resp.ok) throw new Error(`HTTP ${resp.status}`);
    const rows = await resp.json();
    stats.textContent = `Possible typos: ${rows.length} • ~${Math.round(performance.now() - t0)} ms`;
    out.innerHTML = rows.map(r => `<div class="row"><span class="small">${r.line}:</span>
      <span class="word">${esc(r.word)}</span> is possibly typo. Did you mean: ${esc(r.suggestions.join(","))}</div>`).join("");
  }catch(e){
    stats.textContent = `Error: ${e.message ?? e}`;
  }
});
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run the typo checker JSON API")
    ap.add_argument("-d", "--dictionary", default=CFG.DEFAULT_DICTIONARY_FILE)
    ap.add_argument("-k", "--keyword", default=None)
    ap.add_argument("--min-len", type=int, default=CFG.MIN_WORD_LEN)
    ap.add_argument("--distance", type=int, default=CFG.LEVENSHTEIN_DISTANCE)
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO)

    global _checker
    _checker = TypoChecker(
        min_word_len=args.min_len,
        levenshtein_distance=args.distance,
        dictionary_file=args.dictionary,
        keyword_file=args.keyword,
    )
    app.run(host=args.host, port=args.port, debug=args.verbose)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
