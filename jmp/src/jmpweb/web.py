from __future__ import annotations
import argparse
from typing import Optional

from flask import Flask, request, jsonify, Response

from jmp import config as CFG
from jmp.distance import format_distance
from jmp.engine import Engine
from jmp.errors import EmptyMatchSet, JmpError, NoTableLocation, TableAccessError

app = Flask(__name__)

# Table the preview reads. The table is opened per request so the exclusive
# lock is never held between requests and the jmp CLI keeps working. The
# preview never creates a missing table.
_table: Optional[str] = None


def _open() -> Engine:
    return Engine().open(_table, create=False)


def _show(b: bytes) -> str:
    return b.decode("utf-8", "replace")


@app.errorhandler(JmpError)
def _jmp_error(exc: JmpError):
    status = 404 if isinstance(exc, (EmptyMatchSet, NoTableLocation, TableAccessError)) else 500
    return jsonify({"ok": False, "error": str(exc), "exit_code": exc.exit_code}), status


# ---------- API ----------
@app.get("/health")
def health():
    with _open() as eng:
        entries = eng.entries()
        return jsonify({"ok": True, "table": eng.locate(), "entries": len(entries)})


@app.get("/api/table")
def api_table():
    with _open() as eng:
        return jsonify([
            {"line": e.line_no, "path": _show(e.path), "valid": e.valid}
            for e in eng.entries()
        ])


@app.get("/api/match")
def api_match():
    q = request.args.get("q", "", type=str)
    if not q:
        return jsonify({})
    diagnostics: list[str] = []
    with _open() as eng:
        res = eng.match(q, calculations=True, report=diagnostics.append)
    return jsonify({
        "pattern": q,
        "match": _show(res.path),
        "distance": res.distance,
        "calculations": [
            {"leaf": _show(c.leaf), "distance": c.distance, "shown": format_distance(c.distance)}
            for c in res.calculations
        ],
        "diagnostics": diagnostics,
    })


@app.get("/api/compare")
def api_compare():
    a = request.args.get("a", "", type=str)
    b = request.args.get("b", "", type=str)
    d = Engine.compare(a, b)
    return jsonify({"a": a, "b": b, "distance": d, "shown": format_distance(d)})


# ---------- UI ----------
@app.get("/")
def home():
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>jmp • jumptable preview</title>
<style>
:root{ --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6; --accent:#6ee7ff; --border:#1c2530; }
*{box-sizing:border-box}
body{ margin:0; background:var(--bg); color:var(--ink); font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Arial; }
.container{ max-width:980px; margin:24px auto; padding:0 16px; }
.card{ background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px; }
h1{ font-size:20px; margin:0 0 8px 0 }
input{ width:100%; padding:12px 14px; border-radius:12px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); outline:none; font-size:16px; }
input:focus{ border-color:var(--accent) }
.row{ display:grid; grid-template-columns:1fr 14rem; gap:10px; padding:10px 14px; border-top:1px solid var(--border); }
.best{ color:var(--accent) }
.bad{ color:#ff5d5d }
.mono{ font-family: ui-monospace, Menlo, Consolas, monospace }
.meta{ color:var(--muted); font-size:13px; margin-top:6px }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>jumptable</h1>
      <input id="q" type="text" placeholder="Pattern…" autocomplete="off" autofocus />
      <div id="meta" class="meta">Ready.</div>
      <div id="out"></div>
    </div>
  </div>
<script>
const q = document.querySelector("#q"), out = document.querySelector("#out"), meta = document.querySelector("#meta");
const esc = (s) => String(s).replace(/[&<>"]/g, (c) => ({"&":"&amp;","<":"&lt;",">":"&gt;",'"':"&quot;"}[c]));
let t;
async function table(){
  const rows = await (await fetch("/api/table")).json();
  meta.textContent = `${rows.length} entries`;
  out.innerHTML = rows.map(r => `<div class="row mono ${r.valid ? "" : "bad"}"><div>${esc(r.path)}</div><div>line ${r.line}</div></div>`).join("");
}
async function match(){
  const p = q.value;
  if(!p){ return table(); }
  const resp = await fetch(`/api/match?q=${encodeURIComponent(p)}`);
  const data = await resp.json();
  if(!resp.ok){ meta.textContent = data.error; out.innerHTML = ""; return; }
  meta.textContent = `match: ${data.match}`;
  out.innerHTML = data.calculations.map(c =>
    `<div class="row mono ${data.match.endsWith("/" + c.leaf) && c.distance === data.distance ? "best" : ""}"><div>${esc(c.leaf)}</div><div>${c.shown}</div></div>`).join("");
}
q.addEventListener("input", () => { clearTimeout(t); t = setTimeout(match, 150); });
table();
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run the jumptable preview (Flask)")
    ap.add_argument("-t", "--jumptable", default=None, help="Override default jumptable")
    ap.add_argument("--host", default=CFG.WEB_HOST)
    ap.add_argument("--port", type=int, default=CFG.WEB_PORT)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _table
    _table = args.jumptable

    # fail early if the table can't be located or opened
    try:
        Engine().open(_table, create=False, verbose=args.verbose).shutdown()
    except JmpError as exc:
        ap.exit(exc.exit_code, f"{exc}\n")

    app.run(host=args.host, port=args.port, debug=args.verbose)
    return 0
