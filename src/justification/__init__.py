"""Text justification.

Justification reflows text so that every line of a paragraph, except the
last one, is exactly as wide as the configured line width. Words are never
split and whitespace between words is spread as evenly as possible, with the
leftmost gaps receiving the extra spaces.
"""
