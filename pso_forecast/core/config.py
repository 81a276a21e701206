"""
Configuration management for the PSO forecasting framework.
"""
import yaml
from dataclasses import dataclass, field, asdict
from typing import Dict, Any, Optional
from pathlib import Path
from datetime import datetime

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "configs" / "default.yaml"


@dataclass
class DataConfig:
    """Data loading configuration."""
    input_path: str = "data/raw/stock_prices.csv"
    value_column: int = 1  # "Open" is the second column
    train_size: int = 600
    holdout_size: int = 30


@dataclass
class OptimizationConfig:
    """Swarm optimization configuration."""
    n_particles: int = 30
    n_iterations: int = 100
    w: float = 0.7
    c1: float = 1.5
    c2: float = 1.5
    seed: Optional[int] = None  # None = unseeded


@dataclass
class ReportConfig:
    """Chart and table configuration."""
    title: str = "Open Values - Actual vs Predicted"
    x_label: str = "Index"
    y_label: str = "Open Value"
    forecast_start: Optional[int] = None  # defaults to end of training window
    min_value: Optional[float] = None
    max_points: int = 10


@dataclass
class OutputConfig:
    """Output configuration."""
    base_dir: str = "outputs"
    figure_dpi: int = 300
    figure_format: str = "png"
    save_predictions: bool = True


@dataclass
class Config:
    """Main configuration container."""
    data: DataConfig = field(default_factory=DataConfig)
    optimization: OptimizationConfig = field(default_factory=OptimizationConfig)
    report: ReportConfig = field(default_factory=ReportConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    run_id: Optional[str] = None

    def __post_init__(self):
        if self.run_id is None:
            self.run_id = datetime.now().strftime("run_%Y%m%d_%H%M%S")

    @property
    def run_dir(self) -> Path:
        return Path(self.output.base_dir) / "runs" / self.run_id

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def save(self, path: Optional[str] = None) -> Path:
        if path is None:
            path = self.run_dir / "configs_snapshot" / "config.yaml"
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False)
        return path

    @classmethod
    def load(cls, path: str) -> 'Config':
        with open(path, 'r') as f:
            data = yaml.safe_load(f) or {}
        return cls(
            data=DataConfig(**data.get('data', {})),
            optimization=OptimizationConfig(**data.get('optimization', {})),
            report=ReportConfig(**data.get('report', {})),
            output=OutputConfig(**data.get('output', {})),
            run_id=data.get('run_id')
        )


def create_run_directories(config: Config) -> Dict[str, Path]:
    """Create all output directories for a run."""
    run_dir = config.run_dir
    dirs = {
        'root': run_dir,
        'logs': run_dir / 'logs',
        'tables': run_dir / 'tables',
        'metrics': run_dir / 'metrics',
        'predictions': run_dir / 'predictions',
        'figures': run_dir / 'figures',
        'configs_snapshot': run_dir / 'configs_snapshot'
    }
    for d in dirs.values():
        d.mkdir(parents=True, exist_ok=True)
    return dirs


def get_default_config() -> Config:
    """Get default configuration."""
    return Config()


def load_config(path: Optional[str] = None) -> Config:
    """
    Load a run configuration.

    Without a path, ``configs/default.yaml`` at the project root is used when
    present and the dataclass defaults otherwise. An explicit path must exist.
    """
    if path is None:
        if DEFAULT_CONFIG_PATH.exists():
            return Config.load(DEFAULT_CONFIG_PATH)
        return Config()

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    return Config.load(path)
