import os
import sys
from pathlib import Path

import pytest

# Garante que a raiz do projeto (onde está a pasta src/) esteja no PYTHONPATH
PROJECT_ROOT = Path(__file__).resolve().parents[1]

if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Evita que um .env local altere o nível de log dos testes
os.environ.setdefault("LOG_LEVEL", "WARNING")


@pytest.fixture
def admin():
    from src.domain.models import Role, Usuario
    return Usuario(id="admin-1", role=Role.admin)


@pytest.fixture
def dono():
    from src.domain.models import Role, Usuario
    return Usuario(id="dono-1", role=Role.owner)
