"""
STAGEHAND - Search and Triage Across Gigs, Errands, Hunches And Notebook Drafts

Global search for a performer's workspace: ranks shows, the tasks nested inside
them, and saved ideas against a free-text query or a selected tag.

Architecture:
- Corpus Context: Read-only snapshot of shows, tasks, and ideas
- Search Context: Query normalization, matching, scoring, aggregation, highlighting
"""

__version__ = "0.1.0"
