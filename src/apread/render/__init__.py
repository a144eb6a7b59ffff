"""
Rendering

Turns an outbox page into console output.

Key Components:
- content.py: Filters Create activities and converts their HTML to markdown
- presentation.py: Lays out the handle label and wrapped post bodies
"""
