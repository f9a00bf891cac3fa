"""Natural-language talent search queries -> structured search intent."""

import logging

from pydantic import ValidationError

from models.schemas.talent import TalentQuery
from services import prompt_builder
from services.oracle_service import OracleService

logger = logging.getLogger(__name__)


class QueryParser(OracleService):
    async def parse(self, query: str) -> TalentQuery:
        if not query.strip():
            return TalentQuery()

        data = await self._ask(
            prompt_builder.build_talent_query_prompt(query),
            prompt_builder.TALENT_QUERY_SYSTEM,
        )
        if data is None:
            logger.warning("Talent query parsing unavailable, using empty query")
            return TalentQuery()

        try:
            parsed = TalentQuery.model_validate(data)
        except ValidationError as e:
            logger.warning("Oracle reply does not fit the talent query schema: %s", e)
            return TalentQuery()
        return parsed.model_copy(update={"confidence": min(1.0, max(0.0, parsed.confidence))})

