"""mail-signatures - HTML email signature generator.

Merges a person's details (name, position, contact info) with an
organization profile (branding, fonts, logos, sponsors, footer) and renders
one of the organization's signature layouts as self-contained HTML that
email clients display consistently.

Pipeline:
- resolver: user record + profile -> TemplateData
- templates: TemplateData -> HTML document (original / wide-logo layouts)
- delivery: save the document or copy its body to the clipboard
"""

__version__ = "0.1.0"
__author__ = "mail-signatures contributors"
