from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Any

import typer

from url_fingerprint.config import SECRET_ENV_VAR, ConfigError, FingerprintConfig, build_config, load_config
from url_fingerprint.fingerprint import FingerprintReader, HashAlgorithm, InvalidUrl
from url_fingerprint.observability import configure_logging, get_logger

logger = get_logger(__name__)

app = typer.Typer(add_completion=False)

ConfigOption = Annotated[Path | None, typer.Option("-c", "--config", help="TOML file with a [fingerprint] table.")]
SecretOption = Annotated[str | None, typer.Option("--secret", envvar=SECRET_ENV_VAR, show_envvar=False)]
AlgorithmOption = Annotated[HashAlgorithm | None, typer.Option("--algorithm")]
SchemeOption = Annotated[bool | None, typer.Option("--scheme/--no-scheme")]
UserinfoOption = Annotated[bool | None, typer.Option("--userinfo/--no-userinfo")]
HostOption = Annotated[bool | None, typer.Option("--host/--no-host")]
PortOption = Annotated[bool | None, typer.Option("--port/--no-port")]
PathOption = Annotated[bool | None, typer.Option("--path/--no-path")]
QueryOption = Annotated[bool | None, typer.Option("--query/--no-query")]
FragmentOption = Annotated[bool | None, typer.Option("--fragment/--no-fragment")]


def resolve_config(config_path: Path | None, overrides: dict[str, Any]) -> FingerprintConfig:
    """Merge the optional config file with command line overrides."""
    data: dict[str, Any] = {}
    if config_path is not None:
        data = load_config(config_path).model_dump()
    data.update({key: value for key, value in overrides.items() if value is not None})
    return build_config(data)


def _overrides(secret: str | None, algorithm: HashAlgorithm | None, **flags: bool | None) -> dict[str, Any]:
    overrides: dict[str, Any] = {"secret": secret, "hash_algorithm": algorithm}
    overrides.update({f"include_{name}": value for name, value in flags.items()})
    return overrides


def _build_reader(config_path: Path | None, overrides: dict[str, Any]) -> FingerprintReader:
    try:
        config = resolve_config(config_path, overrides)
    except ConfigError as exc:
        logger.error("config_invalid", error=str(exc))
        raise typer.Exit(code=1) from exc
    return FingerprintReader(config)


@app.command()
def capture(
    urls: Annotated[list[str], typer.Argument(help="URLs to fingerprint.")],
    config: ConfigOption = None,
    secret: SecretOption = None,
    algorithm: AlgorithmOption = None,
    scheme: SchemeOption = None,
    userinfo: UserinfoOption = None,
    host: HostOption = None,
    port: PortOption = None,
    path: PathOption = None,
    query: QueryOption = None,
    fragment: FragmentOption = None,
) -> None:
    """Print the fingerprint of each URL as a JSON line."""
    configure_logging()
    reader = _build_reader(
        config,
        _overrides(
            secret,
            algorithm,
            scheme=scheme,
            userinfo=userinfo,
            host=host,
            port=port,
            path=path,
            query=query,
            fragment=fragment,
        ),
    )
    for url in urls:
        try:
            fingerprint = reader.capture(url)
        except InvalidUrl as exc:
            logger.error("capture_failed", kind=exc.kind.value, error=str(exc))
            raise typer.Exit(code=1) from exc
        line = {
            "url": url.strip(),
            "gist": fingerprint.gist,
            "hash": fingerprint.hash,
            "hash_algorithm": fingerprint.hash_algorithm.value,
        }
        typer.echo(json.dumps(line, ensure_ascii=False))


@app.command()
def compare(
    url_a: Annotated[str, typer.Argument()],
    url_b: Annotated[str, typer.Argument()],
    config: ConfigOption = None,
    secret: SecretOption = None,
    algorithm: AlgorithmOption = None,
    scheme: SchemeOption = None,
    userinfo: UserinfoOption = None,
    host: HostOption = None,
    port: PortOption = None,
    path: PathOption = None,
    query: QueryOption = None,
    fragment: FragmentOption = None,
) -> None:
    """Exit with 0 when both URLs share a fingerprint, 1 otherwise."""
    configure_logging()
    reader = _build_reader(
        config,
        _overrides(
            secret,
            algorithm,
            scheme=scheme,
            userinfo=userinfo,
            host=host,
            port=port,
            path=path,
            query=query,
            fragment=fragment,
        ),
    )
    try:
        matched = reader.compare(reader.capture(url_a), reader.capture(url_b))
    except InvalidUrl as exc:
        logger.error("capture_failed", kind=exc.kind.value, error=str(exc))
        raise typer.Exit(code=1) from exc

    typer.echo("match" if matched else "differ")
    if not matched:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
