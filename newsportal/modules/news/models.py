"""
News Models
===========

Article records as stored in the ``news`` table, the admin form that
creates them, and the fixed category set.
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Optional


class Category(str, Enum):
    ESPECTACULOS = 'Espectáculos'
    GASTRONOMIA = 'Gastronomía'
    LIFESTYLE = 'Lifestyle'
    NEGOCIOS = 'Negocios'
    TURISMO = 'Turismo'

    @classmethod
    def choices(cls):
        return [c.value for c in cls]


# Site navigation, with sub-sections shown in the header dropdowns
CATEGORY_MENU = [
    {'name': 'Gastronomía', 'sub_categories': ['Restaurantes', 'Recetas', 'Chefs']},
    {'name': 'Lifestyle', 'sub_categories': ['Moda', 'Belleza', 'Bienestar']},
    {'name': 'Negocios', 'sub_categories': ['Emprendimiento', 'Finanzas', 'Tecnología']},
    {'name': 'Turismo', 'sub_categories': ['Nacional', 'Internacional', 'Aventura']},
    {'name': 'Nosotros', 'sub_categories': ['Equipo', 'Historia', 'Contacto']},
]


@dataclass
class Article:
    id: str
    title: str
    category: str
    excerpt: str
    content: str
    image_url: str
    user_id: Optional[str] = None
    created_at: Optional[str] = None

    @classmethod
    def from_row(cls, row):
        return cls(
            id=str(row.get('id', '')),
            title=row.get('title') or '',
            category=row.get('category') or '',
            excerpt=row.get('excerpt') or '',
            content=row.get('content') or '',
            image_url=row.get('image_url') or '',
            user_id=row.get('user_id'),
            created_at=row.get('created_at'),
        )

    def to_dict(self):
        return asdict(self)


@dataclass
class ArticleForm:
    title: str = ''
    category: str = ''
    excerpt: str = ''
    content: str = ''

    FIELDS = ('title', 'category', 'excerpt', 'content')

    @classmethod
    def from_mapping(cls, data):
        return cls(**{name: (data.get(name) or '').strip() for name in cls.FIELDS})

    def missing_fields(self):
        return [name for name in self.FIELDS if not getattr(self, name)]

    def has_valid_category(self):
        return self.category in Category.choices()

    def to_record(self, image_url, user_id):
        """Row for the news table"""
        return {
            'title': self.title,
            'category': self.category,
            'excerpt': self.excerpt,
            'content': self.content,
            'image_url': image_url,
            'user_id': user_id,
        }
