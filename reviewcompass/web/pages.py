"""
HTML Renderers - Review Compass Dashboard
==========================================

Server-rendered pages for the operator: request stats, clients ready for
outreach with their recommended platform, and the request history.
"""

from html import escape
from typing import List, Sequence, Tuple

from ..application import Recommendation
from ..domain.models import ClientReviewHistory, ReviewPlatform, ReviewRequest
from ..domain.platforms import get_platform
from ..domain.stats import RequestStats

SHARED_CSS = """
    :root {
        --bg-dark: #0b1020;
        --bg-card: rgba(255,255,255,0.04);
        --border: rgba(255,255,255,0.08);
        --text: #e2e8f0;
        --text-muted: #64748b;
        --accent: #2563eb;
        --gradient: linear-gradient(135deg, #2563eb 0%, #10b981 100%);
    }
    * { margin: 0; padding: 0; box-sizing: border-box; }
    body { font-family: -apple-system, BlinkMacSystemFont, 'Inter', sans-serif; background: var(--bg-dark); color: var(--text); }
    .container { max-width: 1200px; margin: 0 auto; padding: 24px; }
    .card { background: var(--bg-card); border: 1px solid var(--border); border-radius: 14px; padding: 24px; margin-bottom: 24px; }
    h1 { font-size: 26px; font-weight: 800; background: var(--gradient); -webkit-background-clip: text; -webkit-text-fill-color: transparent; }
    .sub { font-size: 13px; color: var(--text-muted); margin-top: 4px; }
    .section-title { font-size: 17px; font-weight: 600; margin-bottom: 16px; }
    .stats { display: grid; grid-template-columns: repeat(auto-fit, minmax(150px, 1fr)); gap: 16px; margin: 24px 0; }
    .stat { text-align: center; }
    .stat-val { font-size: 28px; font-weight: 800; }
    .stat-label { font-size: 11px; color: var(--text-muted); text-transform: uppercase; letter-spacing: 0.5px; margin-top: 6px; }
    table { width: 100%; border-collapse: collapse; font-size: 13px; }
    th, td { text-align: left; padding: 10px 8px; border-bottom: 1px solid var(--border); vertical-align: middle; }
    th { color: var(--text-muted); font-weight: 500; text-transform: uppercase; font-size: 11px; }
    .badge { padding: 3px 9px; border-radius: 6px; font-size: 10px; font-weight: 600; text-transform: uppercase; }
    .badge.sent      { background: rgba(59,130,246,0.15); color: #60a5fa; }
    .badge.opened    { background: rgba(251,191,36,0.15); color: #fbbf24; }
    .badge.completed { background: rgba(52,211,153,0.15); color: #34d399; }
    .badge.expired   { background: rgba(248,113,113,0.15); color: #f87171; }
    .badge.warn      { background: rgba(251,191,36,0.15); color: #fbbf24; }
    .btn { background: var(--gradient); color: #fff; border: none; padding: 8px 16px; border-radius: 8px; font-weight: 600; font-size: 12px; cursor: pointer; }
    select, input[type="text"] { background: rgba(255,255,255,0.05); border: 1px solid var(--border); padding: 7px 10px; border-radius: 8px; color: var(--text); font-size: 12px; }
    .alert { padding: 12px 18px; border-radius: 10px; margin-bottom: 20px; font-size: 14px; background: rgba(37,99,235,0.1); border: 1px solid rgba(37,99,235,0.3); color: #93c5fd; }
    .empty-state { color: var(--text-muted); font-size: 13px; padding: 16px 0; }
"""


def _platform_label(platform_id: str, platforms: Sequence[ReviewPlatform]) -> str:
    platform = get_platform(platform_id, platforms)
    if platform is None:
        return escape(platform_id)
    return f"{platform.icon} {escape(platform.name)}"


def _ready_rows(ready: List[Tuple[ClientReviewHistory, Recommendation]], platforms: Sequence[ReviewPlatform]) -> str:
    rows = ""
    for history, rec in ready:
        client = history.client
        options = "".join(
            f'<option value="{p.id}"{" selected" if rec.platform and p.id == rec.platform.id else ""}>{escape(p.name)}</option>'
            for p in history.available_platforms
        )
        recommended = _platform_label(rec.platform.id, platforms) if rec.platform else "—"
        if rec.platform and not rec.available:
            recommended += ' <span class="badge warn">already requested</span>'
        suggested = history.suggested_platform
        rows += f"""
        <tr>
            <td><strong>{escape(client.name)}</strong><div class="sub">{escape(client.email)}</div></td>
            <td>{len(history.available_platforms)} platforms available</td>
            <td>{recommended}</td>
            <td>{_platform_label(suggested.id, platforms) if suggested else "—"}</td>
            <td>
                <form method="post" action="/outreach/send">
                    <input type="hidden" name="client_id" value="{client.id}">
                    <select name="platform">{options}</select>
                    <input type="text" name="message" placeholder="Custom message (optional)">
                    <button type="submit" class="btn">Send</button>
                </form>
            </td>
        </tr>"""
    return rows


def _history_rows(requests: Sequence[ReviewRequest], platforms: Sequence[ReviewPlatform]) -> str:
    rows = ""
    for req in reversed(list(requests)):
        rows += f"""
        <tr>
            <td>{escape(req.client_name) or req.client_id}</td>
            <td>{_platform_label(req.platform, platforms)}</td>
            <td>{escape(req.sent_at[:10])}</td>
            <td><span class="badge {escape(req.status)}">{escape(req.status.capitalize())}</span></td>
            <td><a href="{escape(req.request_url)}">link</a></td>
        </tr>"""
    return rows


def render_dashboard(
    stats: RequestStats,
    ready: List[Tuple[ClientReviewHistory, Recommendation]],
    requests: Sequence[ReviewRequest],
    platforms: Sequence[ReviewPlatform],
    business_name: str = "",
    message: str = "",
) -> str:
    """Render the main dashboard."""
    msg_html = f'<div class="alert">{escape(message)}</div>' if message else ""

    ready_rows = _ready_rows(ready, platforms)
    if ready_rows:
        ready_html = f"""
        <table>
            <tr><th>Client</th><th>Remaining</th><th>Recommended</th><th>Suggested</th><th>Send</th></tr>
            {ready_rows}
        </table>"""
    else:
        ready_html = '<div class="empty-state">Every client has been asked on every platform. Import more clients to keep going.</div>'

    history_rows = _history_rows(requests, platforms)
    if history_rows:
        history_html = f"""
        <table>
            <tr><th>Client</th><th>Platform</th><th>Sent</th><th>Status</th><th>Review link</th></tr>
            {history_rows}
        </table>"""
    else:
        history_html = '<div class="empty-state">No review requests sent yet.</div>'

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Dashboard - Review Compass</title>
    <style>{SHARED_CSS}</style>
</head>
<body>
    <div class="container">
        <header>
            <h1>Review Request Manager</h1>
            <div class="sub">{escape(business_name or "Smart platform targeting based on customer review history")}</div>
        </header>

        <div class="stats">
            <div class="card stat"><div class="stat-val">{stats.total}</div><div class="stat-label">Total Sent</div></div>
            <div class="card stat"><div class="stat-val">{stats.completed}</div><div class="stat-label">Completed</div></div>
            <div class="card stat"><div class="stat-val">{stats.sent}</div><div class="stat-label">Pending</div></div>
            <div class="card stat"><div class="stat-val">{stats.completion_rate}%</div><div class="stat-label">Success Rate</div></div>
        </div>

        {msg_html}

        <div class="card">
            <div class="section-title">Ready for Review Requests</div>
            {ready_html}
        </div>

        <div class="card">
            <div class="section-title">Import Clients</div>
            <form method="post" action="/import/clients" enctype="multipart/form-data">
                <input type="file" name="file" accept=".xlsx,.xls,.csv">
                <button type="submit" class="btn">Import</button>
            </form>
        </div>

        <div class="card">
            <div class="section-title">Recent Review Requests</div>
            {history_html}
        </div>
    </div>
</body>
</html>"""
