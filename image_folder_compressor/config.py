from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional


@dataclass(frozen=True)
class Factor:
    """
    Par (qualidade, razão de redimensionamento) usado na compressão de uma imagem.

    - quality: qualidade JPEG em (0, 100].
    - size_ratio: escala aplicada à largura e à altura, em (0, 1].

    A faixa recomendada de qualidade é 60 a 80.
    """
    quality: float = 80.0
    size_ratio: float = 0.8

    def __post_init__(self):
        if not (0.0 < self.quality <= 100.0):
            raise ValueError(f"Factor.quality deve estar em (0, 100], recebeu {self.quality}")
        if not (0.0 < self.size_ratio <= 1.0):
            raise ValueError(f"Factor.size_ratio deve estar em (0, 1], recebeu {self.size_ratio}")

    def to_dict(self) -> dict:
        return {"quality": self.quality, "size_ratio": self.size_ratio}

    @classmethod
    def from_dict(cls, data: dict) -> "Factor":
        return cls(
            quality=float(data.get("quality", 80.0)),
            size_ratio=float(data.get("size_ratio", 0.8)),
        )


# (width, height, file_size) -> Factor
FactorCalculator = Callable[[int, int, int], Factor]


@dataclass
class FolderCompressionConfig:
    """
    Configurações de uma execução de compressão de pasta.

    Os campos simples devem ser fáceis de serializar (e.g. para JSON),
    pois representam o "contrato" de como uma pasta foi comprimida.
    O `factor_calculator` é opcional e não é serializado.
    """
    # Caminhos
    input_dir: Path = Path(".")
    output_dir: Path = Path("./compressed")

    # Paralelismo
    thread_count: int = 1

    # Compressão
    factor: Factor = field(default_factory=Factor)
    factor_calculator: Optional[FactorCalculator] = None

    # Política de arquivos
    delete_source: bool = False
    overwrite: bool = False

    def __post_init__(self):
        self.input_dir = Path(self.input_dir)
        self.output_dir = Path(self.output_dir)

    def to_dict(self) -> dict:
        return {
            "input_dir": str(self.input_dir),
            "output_dir": str(self.output_dir),
            "thread_count": self.thread_count,
            "factor": self.factor.to_dict(),
            "delete_source": self.delete_source,
            "overwrite": self.overwrite,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "FolderCompressionConfig":
        return cls(
            input_dir=Path(data.get("input_dir", ".")),
            output_dir=Path(data.get("output_dir", "./compressed")),
            thread_count=data.get("thread_count", 1),
            factor=Factor.from_dict(data.get("factor", {})),
            delete_source=data.get("delete_source", False),
            overwrite=data.get("overwrite", False),
        )
