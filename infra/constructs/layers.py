import logging
import subprocess
from pathlib import Path

import jsii
from aws_cdk import BundlingOptions, ILocalBundling
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

logger = logging.getLogger(__name__)

RUNTIME = _lambda.Runtime.PYTHON_3_13


@jsii.implements(ILocalBundling)
class PythonLocalBundling:
    """ローカル環境で依存パッケージをインストールする Bundling クラス

    uv → pip の順に試し、どちらも使えなければ Docker に任せる。
    """

    def __init__(self, source_path: str) -> None:
        self.source_path = source_path

    def try_bundle(self, output_dir: str, options: BundlingOptions) -> bool:
        """ローカルでバンドリングを試行する。

        Returns:
            True: バンドリング成功（Dockerをスキップ）
            False: バンドリング失敗（Dockerにフォールバック）
        """
        del options  # unused
        requirements_path = Path(self.source_path) / "requirements.txt"
        target_dir = Path(output_dir) / "python"

        if not requirements_path.exists():
            logger.warning("requirements.txt not found: %s", requirements_path)
            return False

        for command in self._install_commands(requirements_path, target_dir):
            if self._run(command):
                return True

        logger.warning("Local bundling failed, falling back to Docker")
        return False

    @staticmethod
    def _install_commands(requirements_path: Path, target_dir: Path) -> list[list[str]]:
        requirements = str(requirements_path)
        target = str(target_dir)
        return [
            ["uv", "pip", "install", "-r", requirements, "--target", target, "--quiet"],
            ["pip", "install", "-r", requirements, "-t", target, "--quiet"],
        ]

    @staticmethod
    def _run(command: list[str]) -> bool:
        tool = command[0]
        try:
            logger.info("Trying local bundling with %s...", tool)
            subprocess.run(command, check=True)
        except FileNotFoundError:
            logger.debug("%s not found", tool)
            return False
        except subprocess.CalledProcessError as e:
            logger.debug("%s install failed: %s", tool, e)
            return False
        logger.info("Local bundling with %s succeeded", tool)
        return True


class Layers(Construct):
    """Lambda Layers Construct"""

    def __init__(
        self,
        scope: Construct,
        id: str,
        layer_source_path: str = "layers/common_layer",
    ) -> None:
        super().__init__(scope, id)

        self.common_layer = _lambda.LayerVersion(
            self,
            "CommonLayer",
            code=_lambda.Code.from_asset(
                layer_source_path,
                bundling=BundlingOptions(
                    image=RUNTIME.bundling_image,
                    command=[
                        "bash",
                        "-c",
                        "pip install -r requirements.txt -t /asset-output/python",
                    ],
                    local=PythonLocalBundling(layer_source_path),
                ),
            ),
            compatible_runtimes=[RUNTIME],
            description="Powertools and pydantic for the booking pricing service",
        )
