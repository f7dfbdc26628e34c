import asyncio
import sys
import os

# Adiciona backend/ ao PYTHONPATH para importar orcafast.*
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "backend"))

from orcafast.core.database import engine
from orcafast.models import Base
from orcafast.models.budget_counter import BudgetCounter
from orcafast.core.config import settings


async def reset():
    print("Conectando ao banco de dados, removendo tabelas...")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        print("Tabelas removidas. Criando as tabelas novamente...")
        await conn.run_sync(Base.metadata.create_all)
        await conn.execute(
            BudgetCounter.__table__.insert().values(
                id=1, next_budget_number=settings.initial_budget_number
            )
        )
    print(f"Banco de dados resetado! Próximo orçamento: {settings.initial_budget_number}")

if __name__ == "__main__":
    asyncio.run(reset())
