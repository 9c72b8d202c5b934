import json
import os
import subprocess
import tempfile
from pathlib import Path
from unittest import mock

from django.test import SimpleTestCase, TestCase

from website import plugins
from website.plugins import (
    CommandResult,
    declared_dependencies,
    dependency_rows,
    parse_audit,
    parse_outdated,
    requirement_name,
    run_command,
    update_one,
)

from .utils import AdminClientMixin

PYPROJECT = """
[project]
name = "demo"
version = "0.1"
dependencies = ["Django>=4.2", "Pillow", "deep-translator>=1.11"]

[project.optional-dependencies]
test = ["pytest>=7.4"]
"""


class ParsingTests(SimpleTestCase):
    def test_requirement_name(self):
        self.assertEqual(requirement_name("Django>=4.2"), "Django")
        self.assertEqual(requirement_name("deep-translator[extra]>=1"), "deep-translator")
        self.assertIsNone(requirement_name(""))

    def test_parse_outdated_filters_declared_names(self):
        output = json.dumps([
            {"name": "Django", "version": "4.2.1", "latest_version": "5.1"},
            {"name": "deep_translator", "version": "1.11.0", "latest_version": "1.11.4"},
            {"name": "urllib3", "version": "1.0", "latest_version": "2.0"},
        ])
        self.assertEqual(parse_outdated(output, ["django", "deep-translator"]), {
            "Django": {"current": "4.2.1", "latest": "5.1"},
            "deep_translator": {"current": "1.11.0", "latest": "1.11.4"},
        })

    def test_parse_outdated_bad_output(self):
        self.assertEqual(parse_outdated(""), {})
        self.assertEqual(parse_outdated("not json"), {})
        self.assertEqual(parse_outdated('{"a": 1}'), {})

    def test_parse_audit_both_formats(self):
        deps = [
            {"name": "django", "version": "4.2.0", "vulns": [{"id": "PYSEC-1"}, {"id": "PYSEC-2"}]},
            {"name": "pillow", "version": "10.0.0", "vulns": []},
        ]
        expected = {"vulnerabilities": {"django": 2}, "total": 2}
        self.assertEqual(parse_audit(json.dumps(deps)), expected)
        self.assertEqual(parse_audit(json.dumps({"dependencies": deps, "fixes": []})), expected)
        self.assertEqual(parse_audit("garbage"), {"vulnerabilities": {}, "total": 0})

    def test_declared_dependencies(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "pyproject.toml"
            path.write_text(PYPROJECT, encoding="utf-8")
            deps, test_deps = declared_dependencies(path)
        self.assertEqual(deps, {"Django": ">=4.2", "Pillow": "*", "deep-translator": ">=1.11"})
        self.assertEqual(test_deps, {"pytest": ">=7.4"})

    def test_missing_pyproject(self):
        self.assertEqual(declared_dependencies(os.path.join(tempfile.gettempdir(), "nope", "pyproject.toml")), ({}, {}))

    def test_dependency_rows_join_outdated_info(self):
        rows = dependency_rows({"Django": ">=4.2", "Pillow": "*"}, {"django": {"current": "4.2", "latest": "5.1"}})
        self.assertEqual(rows, [
            {"name": "Django", "spec": ">=4.2", "current": "4.2", "latest": "5.1"},
            {"name": "Pillow", "spec": "*", "current": "", "latest": ""},
        ])


class RunCommandTests(SimpleTestCase):
    @mock.patch("website.plugins.subprocess.run")
    def test_output_is_captured_and_truncated(self, run):
        run.return_value = subprocess.CompletedProcess(["x"], 0, stdout="a" * 50, stderr="")
        result = run_command(["x"], timeout=5, max_output=10)
        self.assertTrue(result.ok)
        self.assertEqual(result.stdout, "a" * 10)
        self.assertFalse(run.call_args.kwargs.get("shell", False))

    @mock.patch("website.plugins.subprocess.run", side_effect=subprocess.TimeoutExpired(["x"], 5))
    def test_timeout_is_reported(self, run):
        result = run_command(["x"], timeout=5)
        self.assertTrue(result.timed_out)
        self.assertFalse(result.ok)

    @mock.patch("website.plugins.subprocess.run", side_effect=FileNotFoundError("no such file"))
    def test_missing_executable_is_reported(self, run):
        result = run_command(["does-not-exist"])
        self.assertIsNone(result.returncode)
        self.assertIn("no such file", result.stderr)

    @mock.patch("website.plugins.run_command")
    def test_invalid_package_name_never_runs(self, run):
        for name in ("", "django; rm -rf /", "-e", "../x", "pkg name"):
            self.assertIsNone(update_one(name))
        run.assert_not_called()

    @mock.patch("website.plugins.run_command", return_value=CommandResult(args=[], returncode=0))
    def test_valid_package_name_is_upgraded(self, run):
        update_one("deep-translator")
        self.assertEqual(run.call_args.args[0][-3:], ["install", "--upgrade", "deep-translator"])


@mock.patch("website.plugins.run_command", return_value=CommandResult(args=[], returncode=0, stdout="[]"))
class PluginViewTests(AdminClientMixin, TestCase):
    def setUp(self):
        self.login_admin()

    def test_page_lists_declared_dependencies(self, run):
        response = self.client.get("/admin/plugins")
        self.assertEqual(response.status_code, 200)
        names = [row["name"] for row in response.context["dep_rows"]]
        self.assertIn("Django", names)
        self.assertEqual(response.context["audit"], {"vulnerabilities": {}, "total": 0})

    def test_update_one(self, run):
        response = self.client.post("/admin/plugins/update/Pillow")
        self.assertRedirects(response, "/admin/plugins?updated=one&pkg=Pillow", fetch_redirect_response=False)

    def test_update_one_rejects_bad_name(self, run):
        response = self.client.post("/admin/plugins/update/-rf")
        self.assertRedirects(response, "/admin/plugins", fetch_redirect_response=False)
        run.assert_not_called()

    def test_update_all_and_audit_fix(self, run):
        self.assertRedirects(self.client.post("/admin/plugins/update-all"), "/admin/plugins?updated=all",
                             fetch_redirect_response=False)
        self.assertRedirects(self.client.post("/admin/plugins/audit-fix"), "/admin/plugins?audit_fixed=1",
                             fetch_redirect_response=False)
        self.assertRedirects(self.client.post("/admin/system/update-plugins"),
                             "/admin/dashboard?plugins_updated=1", fetch_redirect_response=False)
        self.assertEqual(run.call_count, 3)

    def test_updates_need_post(self, run):
        self.assertEqual(self.client.get("/admin/plugins/update-all").status_code, 405)
        run.assert_not_called()

    def test_anonymous_cannot_update(self, run):
        self.client.logout()
        response = self.client.post("/admin/plugins/update-all")
        self.assertRedirects(response, "/admin/login", fetch_redirect_response=False)
        run.assert_not_called()

    def test_pip_is_invoked_with_current_interpreter(self, run):
        plugins.update_all()
        args = run.call_args.args[0]
        self.assertEqual(args[:3], plugins.PIP)
        self.assertIn("--upgrade", args)
