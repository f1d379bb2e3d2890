from content.models import Page


def create_page(slug='about-us', title='About us', is_published=True, **extra):
    extra.setdefault('content', f'<p>{title}</p>')
    return Page.objects.create(slug=slug, title=title, is_published=is_published, **extra)
