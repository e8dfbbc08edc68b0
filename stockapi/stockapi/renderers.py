import simplejson
from rest_framework.renderers import JSONRenderer
from rest_framework.utils import encoders

SHORT_SEPARATORS = (",", ":")
LONG_SEPARATORS = (", ", ": ")


class DecimalJSONRenderer(JSONRenderer):
    """JSONRenderer that writes Decimal values as exact JSON numbers instead of floats."""

    def render(self, data, accepted_media_type=None, renderer_context=None):
        if data is None:
            return b""

        renderer_context = renderer_context or {}
        indent = self.get_indent(accepted_media_type, renderer_context)
        separators = SHORT_SEPARATORS if (indent is None and self.compact) else LONG_SEPARATORS

        ret = simplejson.dumps(
            data,
            use_decimal=True,
            default=encoders.JSONEncoder().default,
            ensure_ascii=self.ensure_ascii,
            allow_nan=not self.strict,
            indent=indent,
            separators=separators,
        )

        # Same escaping as DRF: U+2028/U+2029 are valid JSON but break JavaScript
        ret = ret.replace("\u2028", "\\u2028").replace("\u2029", "\\u2029")
        return ret.encode()
