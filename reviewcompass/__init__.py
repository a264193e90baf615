# Review Compass - Review Request Targeting
# ==========================================
# Decides which review platform to ask each client for next, composes the
# outreach message and hands it to the request tracking backend.
#
# ARCHITECTURE LAYERS:
# - Presentation:   FastAPI backend/dashboard, outreach CLI
# - Application:    OutreachService (orchestration, no business rules)
# - Domain:         Pure rules (catalog, history index, recommendation, composer)
# - Infrastructure: REST API client, SQLite store, spreadsheet importer, config
#
# Domain functions take every input explicitly (clients, requests, industry),
# so they can be recomputed from any fresh snapshot.

__version__ = "0.1.0"
