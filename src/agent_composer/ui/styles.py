"""Embedded CSS styles for the agent selection page.

All styles are self-contained -- no external stylesheets or CDN references.
The layout is a two-column grid: agent list on the left, prompt preview on
the right.
"""

from __future__ import annotations

PAGE_CSS: str = """
*,*::before,*::after{box-sizing:border-box;margin:0;padding:0}
body{font-family:-apple-system,BlinkMacSystemFont,'Segoe UI',Roboto,
  Oxygen,Ubuntu,sans-serif;background:#f1f5f9;color:#1e293b;line-height:1.5}
.header{background:#1a1a2e;color:#fff;padding:20px 32px;
  display:flex;align-items:center;justify-content:space-between;flex-wrap:wrap}
.header h1{font-size:1.4rem;font-weight:700;letter-spacing:-0.02em}
.header .subtitle{font-size:0.85rem;color:#94a3b8;margin-top:2px}
.header .totals{font-size:0.9rem;color:#cbd5e1}
.container{display:grid;grid-template-columns:minmax(320px,2fr) 3fr;gap:16px;
  max-width:1440px;margin:0 auto;padding:16px}
.panel{background:#fff;border-radius:10px;box-shadow:0 1px 3px rgba(0,0,0,.08);
  overflow:hidden;display:flex;flex-direction:column;max-height:calc(100vh - 120px)}
.toolbar{display:flex;align-items:center;gap:8px;padding:12px 16px;
  background:#f8fafc;border-bottom:1px solid #e2e8f0}
.toolbar h2{font-size:1rem;font-weight:600}
.toolbar .spacer{flex:1}
.toolbar input{flex:1;padding:6px 10px;border:1px solid #cbd5e1;border-radius:6px}
button{padding:6px 12px;border:1px solid #cbd5e1;border-radius:6px;
  background:#fff;cursor:pointer;font-size:0.85rem}
button:hover{background:#eef2ff}
#agent-list{overflow-y:auto;padding:8px 0}
.category{padding:10px 16px 4px;font-size:0.75rem;font-weight:700;
  text-transform:uppercase;letter-spacing:0.05em;color:#64748b}
.agent{display:flex;gap:10px;padding:8px 16px;cursor:pointer;
  border-left:3px solid transparent}
.agent:hover{background:#f8fafc}
.agent.selected{border-left-color:#3b82f6;background:#eff6ff}
.agent .name{font-weight:600}
.agent .desc{font-size:0.82rem;color:#475569}
.agent .meta{font-size:0.75rem;color:#94a3b8}
.tag{display:inline-block;background:#e2e8f0;border-radius:4px;
  padding:0 6px;margin-right:4px}
.empty-state{padding:24px;text-align:center;color:#94a3b8}
.task{padding:12px 16px;border-bottom:1px solid #e2e8f0}
.task label{display:block;font-size:0.85rem;font-weight:600;margin-bottom:4px}
.task textarea{width:100%;padding:8px 10px;border:1px solid #cbd5e1;border-radius:6px;
  font:inherit;font-size:0.85rem;resize:vertical}
.task .hint,.shortcuts{font-size:0.75rem;color:#94a3b8}
.shortcuts{padding:8px 16px;border-top:1px solid #e2e8f0}
#prompt{flex:1;overflow:auto;padding:16px;font-size:0.82rem;
  white-space:pre-wrap;font-family:ui-monospace,SFMono-Regular,Menlo,monospace}
@media (max-width:900px){.container{grid-template-columns:1fr}}
"""
