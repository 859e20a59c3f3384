"""
cherry-train: reset, pull, then cherry-pick and push a list of revisions.
"""
