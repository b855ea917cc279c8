"""Static page chrome: style sheets and inline scripts."""

from __future__ import annotations

import json

FONT_LINK_BLOG = (
    '<link href="https://fonts.googleapis.com/css2?family=Cormorant+Garamond:wght@600;700'
    '&amp;family=Space+Grotesk:wght@400;500;600;700&amp;display=swap" rel="stylesheet">'
)
FONT_LINK_FORUM = (
    '<link href="https://fonts.googleapis.com/css2?family=Sora:wght@400;500;600;700'
    '&amp;display=swap" rel="stylesheet">'
)

BLOG_ARCHIVE_CSS = """
:root{--ink:#0f172a;--muted:#6b7280;--card:#ffffff;--border:#e5e7eb;--accent:#0ea5e9;--accent-2:#e2e8f0}
body{font-family:'Space Grotesk',system-ui,-apple-system,sans-serif;margin:0;color:var(--ink);
  background:radial-gradient(1200px 600px at 10% -10%,#f8fafc 0%,#f1f5f9 40%,#ffffff 100%)}
.wrap{max-width:1200px;margin:0 auto;padding:40px 20px}
h1{margin:0 0 10px;font-size:36px;font-family:'Cormorant Garamond',serif;letter-spacing:0.5px}
.sub{color:var(--muted);margin:0 0 28px;font-size:16px}
.hero{display:flex;justify-content:space-between;align-items:center;margin-bottom:18px;gap:12px;flex-wrap:wrap}
.submit{display:inline-block;padding:10px 14px;border-radius:10px;border:1px solid #e2e8f0;text-decoration:none;color:#0f172a;background:#fff}
.submit:hover{border-color:#bae6fd}
.layout{display:grid;grid-template-columns:1.2fr 0.8fr;gap:28px;align-items:start}
.list{display:flex;flex-direction:column;gap:16px}
.post{display:block;text-decoration:none;background:var(--card);border:1px solid var(--border);border-radius:18px;
  padding:18px 20px;box-shadow:0 6px 20px rgba(15,23,42,0.06);transition:transform .2s,border-color .2s,box-shadow .2s}
.post:hover{border-color:#bae6fd;transform:translateY(-2px);box-shadow:0 12px 24px rgba(15,23,42,0.12)}
.title{font-weight:700;color:var(--ink);font-size:20px}
.meta{color:var(--muted);font-size:13px;margin-top:6px}
.desc{color:#334155;font-size:15px;line-height:1.5;margin-top:10px;overflow:hidden}
.read{margin-top:12px;color:var(--accent);font-weight:600;font-size:14px}
.side{background:var(--card);border:1px solid var(--border);border-radius:18px;padding:18px;position:sticky;top:20px;
  box-shadow:0 6px 20px rgba(15,23,42,0.06)}
.side h3{margin:0 0 12px;font-size:18px}
.side-links{display:flex;flex-direction:column;gap:12px}
.side-link{text-decoration:none;border:1px solid var(--accent-2);border-radius:12px;padding:10px 12px;display:block}
.side-link:hover{border-color:#bae6fd;background:#f8fafc}
.side-title{font-weight:600;color:var(--ink);font-size:14px}
.side-date{color:var(--muted);font-size:12px;margin-top:4px}
.cta{margin-top:16px;padding:12px 14px;border-radius:12px;border:1px dashed #bae6fd;background:#f0f9ff;font-size:14px}
.cta a{color:var(--accent);text-decoration:none;font-weight:600}
.empty{color:#6b7280}
@media (max-width:900px){.layout{grid-template-columns:1fr}.side{position:static}}
@media (max-width:600px){h1{font-size:30px}}
"""

ARTICLE_CSS = """
body{font-family:-apple-system,BlinkMacSystemFont,'Segoe UI',sans-serif;background:#fff;color:#111827;margin:0}
.wrap{max-width:900px;margin:0 auto;padding:28px 18px}
a{color:inherit}
.back{display:inline-block;margin-bottom:16px;color:#6b7280;text-decoration:none}
.back:hover{text-decoration:underline}
"""

FORM_CSS = """
.card{background:#fff;border:1px solid #e5e7eb;border-radius:12px;padding:16px}
label{display:block;font-weight:600;margin-bottom:6px}
input,textarea{width:100%;padding:10px;border:1px solid #d1d5db;border-radius:8px;font-family:inherit;box-sizing:border-box}
textarea{min-height:160px;resize:vertical}
.btn{padding:10px 16px;border:0;border-radius:8px;background:#111827;color:#fff;font-weight:600;cursor:pointer}
.note{color:#6b7280;font-size:13px;margin-top:8px}
.msg{margin-top:10px;font-size:14px}
"""

FORUM_CSS = """
body{font-family:'Sora',system-ui,-apple-system,sans-serif;margin:0;color:#0f172a;background:#f8fafc}
.wrap{max-width:1200px;margin:0 auto;padding:40px 20px}
h1{margin:0 0 10px;font-size:34px}
.sub{color:#64748b;margin:0 0 14px}
.hero{display:flex;justify-content:space-between;align-items:flex-start;gap:12px;flex-wrap:wrap;margin-bottom:20px}
.chip{display:inline-flex;gap:6px;align-items:center;padding:6px 10px;border-radius:999px;background:#e0f2fe;color:#0369a1;font-size:13px}
.layout{display:grid;grid-template-columns:1.3fr 0.7fr;gap:24px;align-items:start}
.search input{width:100%;padding:12px 14px;border-radius:12px;border:1px solid #e2e8f0;margin-bottom:14px;box-sizing:border-box}
.list{display:flex;flex-direction:column;gap:14px;margin-bottom:20px}
.topic-card{display:block;text-decoration:none;color:inherit;background:#fff;border:1px solid #e2e8f0;border-radius:16px;padding:16px 18px}
.topic-card:hover{border-color:#7dd3fc}
.topic-head{display:flex;justify-content:space-between;gap:10px;align-items:center}
.title{font-weight:700;font-size:18px}
.pill{font-size:12px;padding:4px 10px;border-radius:999px;background:#f1f5f9;color:#475569;white-space:nowrap}
.meta{color:#94a3b8;font-size:13px;margin-top:6px}
.desc{color:#334155;font-size:15px;line-height:1.5;margin-top:8px}
.read-more{margin-top:10px;color:#0284c7;font-weight:600;font-size:14px}
.card,.form{background:#fff;border:1px solid #e2e8f0;border-radius:16px;padding:18px;margin-bottom:16px}
.reply{border-top:1px solid #f1f5f9;padding:12px 0}
.reply:first-child{border-top:0}
.reply-body{margin-top:6px;white-space:pre-wrap;line-height:1.5}
.back{display:inline-block;margin-bottom:16px;color:#64748b;text-decoration:none}
.side{background:#fff;border:1px solid #e2e8f0;border-radius:16px;padding:18px;position:sticky;top:20px}
.side h3{margin:0 0 12px}
.side-links{display:flex;flex-direction:column;gap:10px;margin-bottom:14px}
.side-link{display:block;text-decoration:none;color:inherit;border:1px solid #f1f5f9;border-radius:12px;padding:10px 12px}
.side-title{font-weight:600;font-size:14px}
.side-date{color:#94a3b8;font-size:12px;margin-top:4px}
.empty{color:#94a3b8}
label{display:block;font-weight:600;margin-bottom:6px}
input,textarea{width:100%;padding:10px;border:1px solid #d1d5db;border-radius:8px;font-family:inherit;box-sizing:border-box}
textarea{min-height:140px;resize:vertical}
.btn{padding:10px 16px;border:0;border-radius:8px;background:#0f172a;color:#fff;font-weight:600;cursor:pointer}
.note{color:#94a3b8;font-size:13px;margin-top:8px}
.msg{margin-top:10px;font-size:14px}
@media (max-width:900px){.layout{grid-template-columns:1fr}.side{position:static}}
"""


def _submit_script(
    endpoint: str, fields: tuple[str, ...], prefix: str, reset: tuple[str, ...], extra: str = ""
) -> str:
    reads = ",".join(
        f"{name}:document.getElementById('{prefix}-{name}').value.trim()" for name in fields
    )
    clears = "".join(f"document.getElementById('{prefix}-{name}').value='';" for name in reset)
    return (
        f"const btn=document.getElementById('{prefix}-submit');"
        f"const msg=document.getElementById('{prefix}-msg');"
        "btn.addEventListener('click',async()=>{msg.textContent='';"
        f"const payload={{{reads}{extra}}};"
        f"try{{const res=await fetch('{endpoint}',{{method:'POST',"
        "headers:{'Content-Type':'application/json'},body:JSON.stringify(payload)});"
        "const data=await res.json();"
        "if(!data.success)throw new Error(data.error||'Failed to submit');"
        "msg.style.color='#047857';msg.textContent='Submitted! Waiting for admin approval.';"
        f"{clears}"
        "}catch(e){msg.style.color='#b91c1c';msg.textContent=e.message||'Failed to submit';}});"
    )


def _script_literal(value: str) -> str:
    """JSON string literal that cannot terminate an enclosing ``<script>`` element."""
    return (
        json.dumps(value)
        .replace("<", "\\u003c")
        .replace(">", "\\u003e")
        .replace("&", "\\u0026")
    )


def blog_submit_script() -> str:
    return _submit_script(
        "/api/blog/submit", ("name", "email", "title", "body"), "blog", ("title", "body")
    )


def forum_archive_script() -> str:
    search = (
        "const search=document.getElementById('forum-search');"
        "const list=document.getElementById('forum-list');"
        "if(search&&list){search.addEventListener('input',()=>{"
        "const q=search.value.trim().toLowerCase();"
        "list.querySelectorAll('.topic-card').forEach(c=>{"
        "const hay=(c.getAttribute('data-search')||'').toLowerCase();"
        "c.style.display=!q||hay.includes(q)?'':'none';});});}"
    )
    submit = _submit_script(
        "/api/forum/topic/submit", ("name", "email", "title", "body"), "forum", ("title", "body")
    )
    return search + submit


def forum_topic_script(slug: str) -> str:
    return _submit_script(
        "/api/forum/reply/submit",
        ("name", "email", "body"),
        "reply",
        ("body",),
        extra=f",slug:{_script_literal(slug)}",
    )
