from pathlib import Path

from typer.testing import CliRunner

from awswire.cli import app

runner = CliRunner()


def test_shapes_can_be_filtered_by_service() -> None:
    result = runner.invoke(app, ["shapes", "--service", "cloudwatch"])

    assert result.exit_code == 0
    assert "cloudwatch.Datapoint" in result.output
    assert "cloudwatch.StandardUnit" in result.output
    assert "ec2.Instance" not in result.output


def test_describe_record() -> None:
    result = runner.invoke(app, ["describe", "cloudwatch.Datapoint"])

    assert result.exit_code == 0
    assert "SampleCount" in result.output
    assert "timestamp" in result.output


def test_describe_request_shows_binding() -> None:
    result = runner.invoke(app, ["describe", "gamelift.DescribeFleetCapacityRequest"])

    assert result.exit_code == 0
    assert "AmazonGameLift json POST" in result.output
    assert "FleetIds" in result.output


def test_describe_unknown_shape() -> None:
    result = runner.invoke(app, ["describe", "nope.Missing"])

    assert result.exit_code == 1
    assert "No shape registered under name: nope.Missing" in result.output


def test_enum_values() -> None:
    result = runner.invoke(app, ["enum", "ec2.InstanceType"])

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0] == "t1.micro"
    assert "m3.2xlarge" in lines


def test_enum_rejects_records() -> None:
    result = runner.invoke(app, ["enum", "cloudwatch.Datapoint"])

    assert result.exit_code == 1
    assert "is a record, not an enum" in result.output


def test_decode_json(tmp_path: Path) -> None:
    document = tmp_path / "response.json"
    document.write_text('{"clientStatus":200,"log":"ok","latency":42}')

    result = runner.invoke(app, ["decode", "apigateway.TestInvokeAuthorizerResult", str(document)])

    assert result.exit_code == 0
    assert '"clientStatus": 200' in result.output
    assert '"latency": 42' in result.output


def test_decode_xml(tmp_path: Path) -> None:
    document = tmp_path / "response.xml"
    document.write_text("<Datapoint><Average>1.5</Average><Unit>Percent</Unit></Datapoint>")

    result = runner.invoke(app, ["decode", "cloudwatch.Datapoint", str(document), "--format", "xml"])

    assert result.exit_code == 0
    assert '"Average": 1.5' in result.output
    assert '"Unit": "Percent"' in result.output



def test_decode_keeps_uri_members(tmp_path: Path) -> None:
    document = tmp_path / "request.json"
    document.write_text('{"restapi_id":"abc","deployment_id":"123","patchOperations":[]}')

    result = runner.invoke(app, ["decode", "apigateway.UpdateDeploymentRequest", str(document)])

    assert result.exit_code == 0
    assert '"restapi_id": "abc"' in result.output
    assert '"deployment_id": "123"' in result.output


def test_decode_failure(tmp_path: Path) -> None:
    document = tmp_path / "response.json"
    document.write_text('{"clientStatus":')

    result = runner.invoke(app, ["decode", "apigateway.TestInvokeAuthorizerResult", str(document)])

    assert result.exit_code == 1
    assert "Unable to parse JSON document" in result.output


def test_encode_request(tmp_path: Path) -> None:
    document = tmp_path / "request.json"
    document.write_text(
        '{"restapi_id":"abc","deployment_id":"123",'
        '"patchOperations":[{"op":"replace","path":"/name","value":"x"}]}'
    )

    result = runner.invoke(app, ["encode", "apigateway.UpdateDeploymentRequest", str(document)])

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0] == "PATCH /restapis/abc/deployments/123"
    assert "Content-Type: application/json" in lines
    assert lines[-1] == '{"patchOperations":[{"op":"replace","path":"/name","value":"x"}]}'


def test_encode_rejects_non_requests(tmp_path: Path) -> None:
    document = tmp_path / "request.json"
    document.write_text("{}")

    result = runner.invoke(app, ["encode", "cloudwatch.Datapoint", str(document)])

    assert result.exit_code == 1
    assert "is not a request shape" in result.output
