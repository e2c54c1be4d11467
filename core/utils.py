from io import BytesIO
from django.http import HttpResponse
from django.template.loader import get_template
from xhtml2pdf import pisa


def get_client_ip(request):
    """Extract client IP safely."""
    forwarded = request.META.get("HTTP_X_FORWARDED_FOR")
    return forwarded.split(",")[0].strip() if forwarded else request.META.get("REMOTE_ADDR")


def render_to_pdf(template_src, context_dict=None, filename=None):
    """
    Helper to render HTML template to PDF
    Returns None when xhtml2pdf reports an error
    """
    template = get_template(template_src)
    html = template.render(context_dict or {})
    result = BytesIO()

    pdf = pisa.pisaDocument(BytesIO(html.encode("UTF-8")), result, encoding="UTF-8")

    if pdf.err:
        return None
    response = HttpResponse(result.getvalue(), content_type='application/pdf')
    if filename:
        response['Content-Disposition'] = f'inline; filename="{filename}"'
    return response
