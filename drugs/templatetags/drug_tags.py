from django import template

register = template.Library()


@register.filter
def page_range(total_pages):
    """1-based page numbers for pagination links: ``{% for i in totalPages|page_range %}``."""
    try:
        return range(1, int(total_pages) + 1)
    except (TypeError, ValueError):
        return range(0)
