from __future__ import annotations

# GH CLI calls (pr create, pr view)
GH_TIMEOUT_SECONDS = 60.0

# Waiting for the version-bump PR to be merged
PR_MERGE_WAIT_SECONDS = 2 * 60 * 60.0
PR_POLL_SECONDS = 30.0

# Waiting for released artifacts to show up in the central repository
CENTRAL_SYNC_WAIT_SECONDS = 3 * 60 * 60.0
CENTRAL_POLL_SECONDS = 60.0

# Single HTTP probe
HTTP_TIMEOUT_SECONDS = 30.0

# kubectl lookups
KUBECTL_TIMEOUT_SECONDS = 30.0
