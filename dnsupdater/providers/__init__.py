"""Collaborators the reconciler talks to."""
