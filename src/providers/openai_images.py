"""Featured image generation through the OpenAI Images API."""

from __future__ import annotations

from openai import OpenAI

import src.config as config


class OpenAIImageGenerator:
    """ImageGenerator returning hosted image URLs."""

    def __init__(
        self,
        client: OpenAI | None = None,
        model: str | None = None,
        size: str | None = None,
    ):
        if client is None:
            if not config.OPENAI_API_KEY:
                raise ValueError("OPENAI_API_KEY not set. Add it to your .env file.")
            client = OpenAI(api_key=config.OPENAI_API_KEY)
        self.client = client
        self.model = model or config.IMAGE_MODEL
        self.size = size or config.IMAGE_SIZE

    def generate_image(self, prompt: str, n: int = 1) -> list[dict]:
        print(f"  -> Generating {n} image(s) ({self.model})...")
        response = self.client.images.generate(
            model=self.model,
            prompt=prompt,
            n=n,
            size=self.size,
        )
        return [{"url": item.url} for item in response.data if getattr(item, "url", None)]
