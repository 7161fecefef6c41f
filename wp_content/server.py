#!/usr/bin/env python3
"""
Servidor MCP de contenido de WordPress
Expone las operaciones de lectura del cliente de contenido como herramientas MCP
"""

import asyncio
import json
import logging
from typing import Any, List, Optional

# Importar el SDK de MCP
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

from .helpers import to_card
from .wordpress_client import ContentClient

# Configurar logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def text_result(data: Any) -> List[TextContent]:
    return [TextContent(
        type="text",
        text=json.dumps(data, indent=2, ensure_ascii=False)
    )]


class ContentMCPServer:
    """Servidor MCP de solo lectura para WordPress"""

    def __init__(self, client: Optional[ContentClient] = None):
        self.server = Server("wordpress-content")
        self.client = client

        # Registrar handlers
        self.setup_handlers()

    def list_tools(self) -> List[Tool]:
        """Lista todas las herramientas disponibles"""
        return [
            Tool(
                name="list_posts",
                description="Lista posts publicados, más recientes primero, con recursos embebidos",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "per_page": {
                            "type": "integer",
                            "description": "Posts por página (default: 12)",
                            "default": 12
                        },
                        "page": {
                            "type": "integer",
                            "description": "Número de página (default: 1)",
                            "default": 1
                        },
                        "categories": {
                            "type": "array",
                            "items": {"type": "integer"},
                            "description": "IDs de categorías para filtrar"
                        },
                        "cards": {
                            "type": "boolean",
                            "description": "Devolver tarjetas en texto plano en vez de posts completos",
                            "default": False
                        }
                    }
                }
            ),
            Tool(
                name="get_post_by_slug",
                description="Obtiene un post por su slug",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "slug": {
                            "type": "string",
                            "description": "Slug del post"
                        }
                    },
                    "required": ["slug"]
                }
            ),
            Tool(
                name="list_all_slugs",
                description="Lista los slugs de todos los posts recorriendo todas las páginas",
                inputSchema={"type": "object", "properties": {}}
            ),
            Tool(
                name="list_categories",
                description="Lista las categorías con al menos un post",
                inputSchema={"type": "object", "properties": {}}
            ),
        ]

    async def call_tool(self, name: str, arguments: dict) -> List[TextContent]:
        """Ejecuta una herramienta"""

        if not self.client:
            return text_result({"error": "Cliente de contenido no inicializado"})

        if name == "list_posts":
            page = await self.client.list_posts(
                per_page=arguments.get('per_page', 12),
                page=arguments.get('page', 1),
                categories=arguments.get('categories')
            )
            if arguments.get('cards'):
                result = {
                    "cards": [to_card(post).model_dump() for post in page.posts],
                    "total_pages": page.total_pages
                }
            else:
                result = page.model_dump(by_alias=True)

        elif name == "get_post_by_slug":
            if 'slug' not in arguments:
                return text_result({"error": "Falta el argumento requerido: slug"})
            post = await self.client.get_post_by_slug(arguments['slug'])
            if post is None:
                return text_result({"error": f"Post {arguments['slug']} no encontrado"})
            result = post.model_dump(by_alias=True)

        elif name == "list_all_slugs":
            result = {"slugs": await self.client.list_all_slugs()}

        elif name == "list_categories":
            categories = await self.client.list_categories()
            result = {"categories": [c.model_dump() for c in categories]}

        else:
            return text_result({"error": f"Herramienta desconocida: {name}"})

        return text_result(result)

    def setup_handlers(self):
        """Configura los handlers del servidor MCP"""

        @self.server.list_tools()
        async def list_tools() -> List[Tool]:
            return self.list_tools()

        @self.server.call_tool()
        async def call_tool(name: str, arguments: dict) -> List[TextContent]:
            return await self.call_tool(name, arguments or {})

    async def run(self):
        """Inicia el servidor MCP"""

        if self.client is None:
            self.client = ContentClient()
        logger.info(f"Servidor MCP de contenido sobre {self.client.api_base}")

        # Iniciar servidor STDIO
        async with stdio_server() as (read_stream, write_stream):
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options()
            )


async def main():
    """Punto de entrada principal"""
    server = ContentMCPServer()
    await server.run()


if __name__ == "__main__":
    asyncio.run(main())
