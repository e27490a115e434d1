"""SEO content dashboard: AI article generation, keyword and ranking tracking.

Package structure:
    src/config.py           – paths, API keys, model settings, dashboard limits
    src/models.py           – article / keyword / ranking / subscription records
    src/dashboard/          – summary statistics, ranking badges, snapshots
    src/store/              – document store (memory, JSON files, Google Sheets)
    src/providers/          – Claude text, OpenAI images, Google search, keyword estimates
    src/pipeline/           – article generation (prompts, API calls, HTML export)
    src/actions/            – owner-scoped operations behind each page
"""
