"""Basic audit example using the built-in DI container."""

from byte_efficiency.core.container import DIContainer
from byte_efficiency.domain.models import NetworkRecord, ResourceType, SourceRecord

SCRIPT = """
// Application bootstrap
function initializeApplication(configuration) {
    var applicationState = { ready: false };
    applicationState.ready = configuration.enabled;
    return applicationState;
}
""" * 200


def main() -> None:
    url = "https://example.com/app.js"
    for assembler in DIContainer.create_assemblers():
        report = assembler.audit(
            [SourceRecord(url=url, content=SCRIPT)],
            [
                NetworkRecord(
                    url=url,
                    transfer_size=len(SCRIPT),
                    resource_type=ResourceType.SCRIPT,
                )
            ],
        )
        print(assembler.estimator.meta.description)
        for row in report.items():
            print(" ", row["url"], row["totalKb"], row["potentialSavings"])
        for skipped in report.skipped:
            print("  skipped:", skipped.url, skipped.reason)


if __name__ == "__main__":
    main()
