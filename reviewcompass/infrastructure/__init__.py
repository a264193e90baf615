# Infrastructure Layer
# ====================
# Contains all external service integrations:
# - api/: REST client for the review request backend
# - persistence/: SQLite store and a gateway over it
# - importer/: Excel/CSV client import
# - config/: Environment and settings management
#
# gateway.ReviewRequestGateway is the seam: the application layer only
# talks to that interface, so the remote API and the local store swap freely.
