"""View rendering module for HTML templates.

This module handles all HTML/template rendering logic, separate from routers.
Views prepare context data and render Jinja2 templates.
"""
