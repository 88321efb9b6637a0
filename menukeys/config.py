import os
import json

from pydantic import BaseModel

from menukeys.core.errors import ConfigError


class SolveConfig(BaseModel):
    """Configuration for a single mnemonic solve."""
    backend: str = "pysat"
    solver_name: str = "g3"  # Glucose 3, ignored by the z3 backend
    enforce_cross_entry_uniqueness: bool = True

    @staticmethod
    def from_env_or_file() -> 'SolveConfig':
        # 1. Try Config Path
        data = {}
        config_path = os.environ.get("MENUKEYS_CONFIG_PATH")
        if config_path and os.path.exists(config_path):
            try:
                with open(config_path, 'r') as f:
                    data = json.load(f)
                config = SolveConfig.model_validate(data)
            except Exception as e:
                raise ConfigError(f"Invalid config file {config_path}: {e}") from e
        else:
            config = SolveConfig()

        # 2. Env vars override the file
        env_backend = os.environ.get("MENUKEYS_BACKEND")
        if env_backend:
            config.backend = env_backend
        env_solver = os.environ.get("MENUKEYS_SOLVER")
        if env_solver:
            config.solver_name = env_solver

        return config
