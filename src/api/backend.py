from typing import Optional

from classification.domain_classifier import DomainClassifier
from generation.task_synthesizer import TaskSynthesizer


class BackendAPI:
    """Central orchestration component: context text in, domain and task list out."""

    def __init__(
        self,
        classifier: Optional[DomainClassifier] = None,
        synthesizer: Optional[TaskSynthesizer] = None,
    ):
        self.classifier = classifier or DomainClassifier()
        self.synthesizer = synthesizer or TaskSynthesizer()

    def generate(self, context: str) -> dict:
        # 1. Pick the domain (reported for metrics / clients)
        domain = self.classifier.classify(context)

        # 2. Expand it into the ordered task list
        tasks = self.synthesizer.synthesize(context, domain=domain)

        return {
            "domain": domain,
            "tasks": tasks,
        }
