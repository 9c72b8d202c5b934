# Standard Library
import re
import sys
import json
import logging
import subprocess
import tomllib
from dataclasses import dataclass
from urllib.parse import quote

# Django
from django.conf import settings
from django.shortcuts import redirect, render
from django.views.decorators.http import require_POST

# Local Imports
from .permissions import admin_required

logger = logging.getLogger(__name__)

PACKAGE_NAME_RE = re.compile(r"^[A-Za-z0-9](?:[A-Za-z0-9._-]*[A-Za-z0-9])?$")
_REQUIREMENT_NAME_RE = re.compile(r"^\s*([A-Za-z0-9][A-Za-z0-9._-]*)")

PIP = [sys.executable, "-m", "pip"]
PIP_AUDIT = [sys.executable, "-m", "pip_audit"]


@dataclass
class CommandResult:
    args: list
    returncode: int | None
    stdout: str = ""
    stderr: str = ""
    timed_out: bool = False

    @property
    def ok(self):
        return self.returncode == 0 and not self.timed_out


def run_command(args, timeout=None, max_output=None) -> CommandResult:
    """
    Run `args` without a shell. Output is cut to `max_output` characters.
    Timeouts and missing executables are logged and reported in the
    result; nothing is raised.
    """
    timeout = timeout or settings.PLUGIN_COMMAND_TIMEOUT
    max_output = max_output or settings.PLUGIN_OUTPUT_LIMIT
    try:
        completed = subprocess.run(
            args,
            capture_output=True,
            text=True,
            timeout=timeout,
            cwd=settings.BASE_DIR,
        )
    except subprocess.TimeoutExpired:
        logger.error("Command timed out after %ss: %s", timeout, " ".join(args))
        return CommandResult(args=list(args), returncode=None, timed_out=True)
    except OSError as e:
        logger.error("Command could not be started: %s (%s)", " ".join(args), e)
        return CommandResult(args=list(args), returncode=None, stderr=str(e))

    result = CommandResult(
        args=list(args),
        returncode=completed.returncode,
        stdout=(completed.stdout or "")[:max_output],
        stderr=(completed.stderr or "")[:max_output],
    )
    if result.stdout:
        logger.info(result.stdout)
    if not result.ok and result.stderr:
        logger.error(result.stderr)
    return result


# ---- Declared dependencies ----

def normalize_name(name):
    return re.sub(r"[-_.]+", "-", name).lower()


def requirement_name(requirement):
    match = _REQUIREMENT_NAME_RE.match(requirement or "")
    return match.group(1) if match else None


def _as_mapping(requirements):
    deps = {}
    for requirement in requirements:
        name = requirement_name(requirement)
        if name:
            deps[name] = requirement[len(name):].strip() or "*"
    return deps


def declared_dependencies(pyproject_path=None):
    """({name: version_spec} of runtime deps, same for the test extra) from pyproject.toml."""
    path = pyproject_path or settings.BASE_DIR / "pyproject.toml"
    try:
        with open(path, "rb") as fh:
            project = tomllib.load(fh).get("project", {})
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Could not read %s: %s", path, e)
        return {}, {}
    extras = project.get("optional-dependencies", {})
    return _as_mapping(project.get("dependencies", [])), _as_mapping(extras.get("test", []))


# ---- Package manager queries ----

def parse_outdated(output, names=None):
    """`pip list --outdated --format=json` -> {name: {"current", "latest"}}; bad output gives {}."""
    try:
        rows = json.loads(output) if output else []
    except ValueError:
        return {}
    if not isinstance(rows, list):
        return {}
    wanted = {normalize_name(n) for n in names} if names is not None else None
    outdated = {}
    for row in rows:
        if not isinstance(row, dict) or "name" not in row:
            continue
        if wanted is not None and normalize_name(row["name"]) not in wanted:
            continue
        outdated[row["name"]] = {"current": row.get("version", ""), "latest": row.get("latest_version", "")}
    return outdated


def parse_audit(output):
    """
    `pip-audit --format json` -> {"vulnerabilities": {name: count}, "total": n}.
    Accepts both the list output of older releases and the
    {"dependencies": [...]} object of newer ones.
    """
    empty = {"vulnerabilities": {}, "total": 0}
    try:
        data = json.loads(output) if output else None
    except ValueError:
        return empty
    if isinstance(data, dict):
        data = data.get("dependencies")
    if not isinstance(data, list):
        return empty

    vulnerabilities = {}
    for dep in data:
        if not isinstance(dep, dict):
            continue
        count = len(dep.get("vulns") or [])
        if count:
            vulnerabilities[dep.get("name", "?")] = count
    return {"vulnerabilities": vulnerabilities, "total": sum(vulnerabilities.values())}


def outdated_packages(names):
    result = run_command(PIP + ["list", "--outdated", "--format=json", "--disable-pip-version-check"])
    return parse_outdated(result.stdout, names)


def audit_packages():
    # pip-audit exits non-zero when it finds vulnerabilities; the JSON is still on stdout
    result = run_command(PIP_AUDIT + ["--format", "json", "--progress-spinner", "off"])
    return parse_audit(result.stdout)


def update_all():
    deps, test_deps = declared_dependencies()
    requirements = [f"{name}{spec if spec != '*' else ''}" for name, spec in {**deps, **test_deps}.items()]
    if not requirements:
        return None
    return run_command(PIP + ["install", "--upgrade"] + requirements)


def update_one(name):
    if not name or not PACKAGE_NAME_RE.match(name):
        logger.warning("Rejected package name %r", name)
        return None
    return run_command(PIP + ["install", "--upgrade", name])


def audit_fix():
    return run_command(PIP_AUDIT + ["--fix", "--progress-spinner", "off"])


# ---- Views ----

def dependency_rows(deps, outdated):
    by_name = {normalize_name(name): info for name, info in outdated.items()}
    rows = []
    for name, spec in deps.items():
        info = by_name.get(normalize_name(name), {})
        rows.append({"name": name, "spec": spec, "current": info.get("current", ""), "latest": info.get("latest", "")})
    return rows


@admin_required
def admin_plugins(request):
    deps, test_deps = declared_dependencies()
    outdated = outdated_packages(list(deps) + list(test_deps))
    return render(request, "admin_console/plugins.html", {
        "dep_rows": dependency_rows(deps, outdated),
        "dev_dep_rows": dependency_rows(test_deps, outdated),
        "outdated": outdated,
        "audit": audit_packages(),
        "updated": request.GET.get("updated", ""),
        "updated_pkg": request.GET.get("pkg", ""),
        "audit_fixed": request.GET.get("audit_fixed", ""),
    })


@admin_required
@require_POST
def plugins_update_all(request):
    update_all()
    return redirect("/admin/plugins?updated=all")


@admin_required
@require_POST
def plugins_update(request, name):
    if update_one(name) is None:
        return redirect("/admin/plugins")
    return redirect(f"/admin/plugins?updated=one&pkg={quote(name)}")


@admin_required
@require_POST
def plugins_audit_fix(request):
    audit_fix()
    return redirect("/admin/plugins?audit_fixed=1")


@admin_required
@require_POST
def system_update_plugins(request):
    update_all()
    return redirect("/admin/dashboard?plugins_updated=1")
