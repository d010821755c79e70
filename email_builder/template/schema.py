"""
Schéma d'un template email — la valeur JSON stockée telle quelle par la
couche de persistance (externe) et rechargée dans l'éditeur.

Exemple minimal :
{
  "id": "tpl-1",
  "name": "Newsletter mars",
  "subject": "Nos nouveautés",
  "blocks": [
    {"id": "b1", "type": "header", "content": {"text": "ACME"}, "styles": {"padding": "24px"}},
    {"id": "b2", "type": "columns", "content": {"columnCount": 2, "children": [{"blocks": []}, {"blocks": []}]}, "styles": {}}
  ],
  "createdAt": 1735689600000,
  "updatedAt": 1735689600000
}
"""
from typing import List, Optional

from pydantic import Field

from ..blocks import BlockUnion, EmailModel, generate_id


class EmailTemplate(EmailModel):
    id: str = Field(default_factory=generate_id)
    name: str = "Untitled Template"
    subject: Optional[str] = None
    body: Optional[str] = None
    blocks: List[BlockUnion] = Field(default_factory=list)
    created_at: Optional[int] = None
    updated_at: Optional[int] = None
