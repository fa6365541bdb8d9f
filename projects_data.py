# projects_data.py
# Data only. No Streamlit code.

PROJECTS = [
    {
        "id": "etl-pipeline",
        "slug": "etl-pipeline",
        "title": "ETL Pipeline for Campus Course Data",
        "subtitle": "Scheduled extraction of course listings into a clean, queryable warehouse.",
        "skills": ["Python", "Pandas", "SQL", "Docker"],
        "highlights": [
            "Scrapes and normalizes ~4k course sections per term",
            "Incremental loads with idempotent upserts",
            "Data quality checks fail the run before bad rows land",
        ],
        "impact": "Cut manual spreadsheet cleanup from hours to a single scheduled job.",
        "cover": None,
        "links": {
            "repo": "https://github.com/ayaanzahmad/etl-pipeline",
        },
    },
    {
        "id": "chat-ui",
        "title": "Chat UI for Document Q&A",
        "subtitle": "Streaming chat front-end over a retrieval-augmented backend.",
        "skills": ["React/Next.js", "FastAPI/Flask", "APIs"],
        "highlights": [
            "Token streaming with graceful reconnects",
            "Source citations rendered inline with each answer",
        ],
        "impact": "Made a pile of PDFs answerable in seconds for a student org.",
        "cover": None,
        "links": {
            "repo": "https://github.com/ayaanzahmad/chat-ui",
            "demo": "https://chat-ui-demo.vercel.app",
        },
    },
    {
        "id": "inbox-automation",
        "slug": "inbox-automation",
        "title": "Inbox-to-Sheets Automation",
        "subtitle": "Parses recurring emails and appends structured rows to a shared sheet.",
        "skills": ["Python", "APIs", "Automation"],
        "highlights": [
            "OAuth-scoped Gmail and Sheets access",
            "Deduplicates by message id so reruns are safe",
        ],
        "impact": "Removed a weekly copy-paste chore for a three-person team.",
        "cover": None,
        "links": {
            "repo": "https://github.com/ayaanzahmad/inbox-automation",
            "writeup": "https://github.com/ayaanzahmad/inbox-automation#readme",
        },
    },
    {
        "id": "market-dashboard",
        "title": "Market Data Dashboard",
        "subtitle": "Interactive dashboard for daily price history and rolling statistics.",
        "skills": ["Python", "Pandas", "SQL"],
        "highlights": [
            "Cached daily pulls stored in SQLite",
            "Rolling volatility and drawdown charts",
        ],
        "impact": None,
        "cover": None,
        "links": {
            "repo": "https://github.com/ayaanzahmad/market-dashboard",
        },
    },
    {
        "id": "portfolio-site",
        "title": "Portfolio (This Site)",
        "subtitle": "Searchable project catalog with tag filters and per-project pages.",
        "skills": ["Python", "Streamlit"],
        "highlights": None,
        "impact": None,
        "cover": None,
        "links": None,
    },
]
