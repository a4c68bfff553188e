DOCS_HTML = """<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <meta name="robots" content="noindex" />
  <title>FACR Scraper API</title>
  <style>
    body { font-family: system-ui, sans-serif; margin: 0; padding: 24px; line-height: 1.5; max-width: 960px; }
    code, pre { background: rgba(127,127,127,.15); padding: .2em .4em; border-radius: 4px; }
    pre { padding: 12px; overflow: auto; }
    .ep { margin: 18px 0; padding: 16px; border-left: 4px solid #4f46e5; background: rgba(79,70,229,.08); border-radius: 6px; }
  </style>
</head>
<body>
  <h1>FACR Scraper API</h1>
  <p>Status: <code>ok</code>. Data is scraped from www.fotbal.cz and is.fotbal.cz on every request.</p>

  <section class="ep">
    <h2>Search clubs</h2>
    <p><strong>GET</strong> <code>/club/search?q=QUERY</code></p>
    <pre>{"query": "Sparta", "count": 1, "results": [{"name": "...", "club_id": "&lt;uuid&gt;",
  "club_type": "football", "url": "...", "logo_url": "...", "category": "...", "address": "..."}]}</pre>
  </section>

  <section class="ep">
    <h2>Club info and matches</h2>
    <p><strong>GET</strong> <code>/club/{type}/{id}</code> with <code>type</code> = <code>football</code> | <code>futsal</code></p>
    <pre>{"name": "...", "club_id": "&lt;uuid&gt;", "club_type": "football", "club_internal_id": "...",
 "url": "...", "logo_url": "...", "address": "...", "category": "Fotbal",
 "competitions": [{"id": "...", "code": "...", "name": "...", "team_count": "16", "matches_link": "...",
   "matches": [{"date_time": "...", "home": "...", "home_id": "...", "home_logo_url": "...",
     "away": "...", "away_id": "...", "away_logo_url": "...", "score": "2:1", "venue": "...",
     "match_id": "...", "report_url": "...", "delegation_url": "..."}]}]}</pre>
  </section>

  <section class="ep">
    <h2>Club standings</h2>
    <p><strong>GET</strong> <code>/club/{type}/{id}/table</code></p>
    <pre>{"name": "...", "competitions": [{"id": "...", "table": {"overall": [{"rank": "1", "team": "...",
  "team_id": "...", "team_logo_url": "...", "played": "10", "wins": "8", "draws": "2", "losses": "0",
  "score": "25:5", "points": "26"}]}}]}</pre>
  </section>

  <section class="ep">
    <h2>Shortcut</h2>
    <p><strong>GET</strong> <code>/club/{id}</code> redirects (301) to <code>/club/football/{id}</code>.</p>
  </section>
</body>
</html>
"""
