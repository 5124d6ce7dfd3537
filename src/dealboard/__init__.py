"""dealboard: CRM-sheet opportunities and issue-tracker tickets for a single dashboard."""

__version__ = "0.1.0"
