"""
Resume Builder - form-driven editor core for a structured resume document

Architecture:
- Domain Context: Resume document and section data structures
- Application Context: Use cases (all document mutations) and storage contract
- Infrastructure Context: Storage adapters and YAML snapshot format
- Presentation Context: Live-document view model, previews and export
"""

__version__ = "0.1.0"
