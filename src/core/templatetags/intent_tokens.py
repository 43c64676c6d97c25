from django import template

from core.csrf import make_intent_token

register = template.Library()


@register.simple_tag(takes_context=True)
def intent_token(context, intent, suffix=""):
    """Render the intent token for ``intent`` + ``suffix``, e.g. ``{% intent_token "delete" article.pk %}``."""
    return make_intent_token(context["request"], f"{intent}{suffix}")
