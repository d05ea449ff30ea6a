"""
Implementation de l'extracteur de metadonnees techniques avec ffprobe.

Ce module fournit FFprobeExtractor qui implemente IMediaExtractor en
invoquant ffprobe dans un sous-processus asyncio, borne par un delai.
Un code de sortie non nul est une erreur douce : les metadonnees encore
lisibles dans la sortie partielle sont conservees.
"""

import asyncio
from pathlib import Path

from loguru import logger

from reelscan.adapters.parsing.probe_parser import parse_probe_output
from reelscan.core.errors import ProbeError
from reelscan.core.ports.extractor import IMediaExtractor, ProbeResult


class FFprobeExtractor(IMediaExtractor):
    """
    Extracteur de metadonnees techniques utilisant ffprobe.

    Attributes:
        ffprobe_path: Executable ffprobe (nom dans le PATH ou chemin absolu)
        timeout: Delai maximal d'un sondage en secondes
    """

    def __init__(self, ffprobe_path: str = "ffprobe", timeout: float = 60.0) -> None:
        self._ffprobe_path = ffprobe_path
        self._timeout = timeout

    def build_args(self, file_path: Path) -> list[str]:
        """Construit la ligne de commande ffprobe pour un fichier."""
        return [
            self._ffprobe_path,
            "-v", "quiet",
            "-print_format", "json",
            "-show_format", "-show_streams",
            "-i", str(file_path),
        ]

    async def extract(self, file_path: Path) -> ProbeResult:
        """
        Sonde un fichier video.

        Args:
            file_path: Chemin complet vers le fichier video

        Returns:
            ProbeResult(metadata, error). Les deux champs sont renseignes
            quand ffprobe sort en erreur mais que sa sortie reste lisible.
        """
        path = str(file_path)
        logger.debug(f"ffprobe: sondage de {path}")

        try:
            process = await asyncio.create_subprocess_exec(
                *self.build_args(file_path),
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            logger.error(f"ffprobe: impossible de lancer {self._ffprobe_path}: {e}")
            return ProbeResult(error=ProbeError(f"failed to run {self._ffprobe_path}: {e}"))

        try:
            async with asyncio.timeout(self._timeout):
                stdout, stderr = await process.communicate()
        except TimeoutError:
            await self._kill(process)
            logger.warning(f"ffprobe: delai de {self._timeout}s depasse pour {path}")
            return ProbeResult(
                error=ProbeError(f"ffprobe timed out after {self._timeout}s for {path}")
            )
        except asyncio.CancelledError:
            await self._kill(process)
            raise

        soft_error = None
        if process.returncode != 0:
            stderr_text = stderr.decode(errors="replace").strip()
            soft_error = ProbeError(
                f"ffprobe exited with code {process.returncode} for {path}",
                exit_code=process.returncode,
                stderr=stderr_text,
            )
            logger.warning(
                f"ffprobe: code de sortie {process.returncode} pour {path}"
                + (f" ({stderr_text})" if stderr_text else "")
            )

        try:
            metadata = parse_probe_output(stdout, filename=path)
        except ProbeError as e:
            logger.warning(f"ffprobe: sortie illisible pour {path}: {e}")
            return ProbeResult(error=soft_error or e)

        return ProbeResult(metadata=metadata, error=soft_error)

    @staticmethod
    async def _kill(process: asyncio.subprocess.Process) -> None:
        if process.returncode is not None:
            return
        try:
            process.kill()
        except ProcessLookupError:
            return
        await process.wait()
