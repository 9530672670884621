from emusite.models.user import User


def test_seed_admin_is_idempotent(app):
    runner = app.test_cli_runner()

    result = runner.invoke(args=["seed-admin"])
    assert "Created admin" in result.output
    assert User.query.filter_by(role="admin").count() == 1

    result = runner.invoke(args=["seed-admin"])
    assert "already exists" in result.output
    assert User.query.count() == 1


def test_reset_admin(app):
    runner = app.test_cli_runner()
    runner.invoke(args=["seed-admin"])

    result = runner.invoke(args=["reset-admin", "--email", "Owner@Example.com", "--password", "newpass1"])
    assert result.exit_code == 0

    user = User.query.filter_by(role="admin").one()
    assert user.email == "owner@example.com"
    assert user.check_password("newpass1")


def test_reset_admin_without_admin(app):
    result = app.test_cli_runner().invoke(args=["reset-admin"])
    assert result.exit_code != 0
