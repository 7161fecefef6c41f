"""
Funciones de presentación sobre posts ya obtenidos (sin I/O)
"""

import re
from datetime import datetime
from typing import List, Optional

from .models import Post, PostCard

# Eliminación ingenua de etiquetas: no decodifica entidades ni valida HTML
TAG_RE = re.compile(r'<[^>]*>')


def featured_image_url(post: Post) -> Optional[str]:
    """URL de la imagen destacada embebida, o None"""
    embedded = post.embedded
    if embedded is None or not embedded.featured_media:
        return None
    return embedded.featured_media[0].source_url or None


def featured_image_alt(post: Post) -> str:
    embedded = post.embedded
    if embedded is None or not embedded.featured_media:
        return ""
    return embedded.featured_media[0].alt_text


def category_names(post: Post) -> List[str]:
    """Nombres del primer grupo de términos embebidos (las categorías)"""
    embedded = post.embedded
    if embedded is None or not embedded.terms:
        return []
    return [term.name for term in embedded.terms[0]]


def format_date(date_str: str) -> str:
    """
    Formatea una fecha ISO como "<año>年<mes>月<día>日"

    Usa la fecha de calendario tal como viene, sin convertir de zona
    horaria. Si no se puede interpretar, devuelve el texto original.
    """
    value = date_str.strip()
    if value.endswith(('Z', 'z')):
        value = value[:-1] + '+00:00'
    try:
        d = datetime.fromisoformat(value)
    except ValueError:
        return date_str
    return f"{d.year}年{d.month}月{d.day}日"


def strip_html(html: str) -> str:
    """Quita todo lo que parezca una etiqueta <...> y recorta espacios"""
    return TAG_RE.sub('', html).strip()


def to_card(post: Post) -> PostCard:
    """Proyección de un post para listados"""
    return PostCard(
        id=post.id,
        slug=post.slug,
        title=strip_html(post.title.rendered),
        excerpt=strip_html(post.excerpt.rendered),
        date=format_date(post.date),
        image_url=featured_image_url(post),
        image_alt=featured_image_alt(post),
        categories=category_names(post),
    )
