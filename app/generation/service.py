from app.bundling.validator import RequestValidator
from app.completion.dispatcher import CompletionDispatcher
from app.completion.factory import CompletionDispatcherFactory
from app.config.settings import Settings
from app.extraction.models import InputField
from app.extraction.registry import ExtractorRegistry
from app.generation.models import GenerationRequest
from app.generation.pipeline import GenerationContext, PipelineStep
from app.generation.steps import (
    AssemblePromptStep,
    CheckTranscriptStep,
    CheckUploadsStep,
    CompleteStep,
    ExtractAttachmentsStep,
    MergeBundlesStep,
)
from app.logging.logger import Log
from app.prompting.prompt_loader import TemplateStore


class GenerationService:
    """Orchestrates one generate request.

    Pipeline: check uploads -> extract transcript and rubric attachments ->
    merge bundles -> check transcript -> assemble prompt -> complete.
    """

    def __init__(
        self,
        *,
        registry: ExtractorRegistry,
        validator: RequestValidator,
        template_store: TemplateStore,
        dispatcher: CompletionDispatcher,
    ) -> None:
        self._template_store = template_store
        self._dispatcher = dispatcher
        self._steps: list[PipelineStep] = [
            CheckUploadsStep(validator),
            ExtractAttachmentsStep(registry, InputField.TRANSCRIPT),
            ExtractAttachmentsStep(registry, InputField.RUBRIC),
            MergeBundlesStep(),
            CheckTranscriptStep(validator),
            AssemblePromptStep(template_store),
            CompleteStep(dispatcher),
        ]

    @property
    def template_store(self) -> TemplateStore:
        return self._template_store

    @property
    def model(self) -> str:
        return self._dispatcher.model

    def generate(self, request: GenerationRequest) -> str:
        """Run the full pipeline and return the generated text."""
        context = GenerationContext(request=request)
        for step in self._steps:
            Log.debug(f"Running step {type(step).__name__}")
            context = step.run(context)
        return context.output


def build_generation_service(settings: Settings) -> GenerationService:
    """Build a GenerationService with all required collaborators."""
    registry = ExtractorRegistry.create(settings)
    template_store = TemplateStore(settings.template_path)
    template_store.preload()
    return GenerationService(
        registry=registry,
        validator=RequestValidator.create(settings, registry),
        template_store=template_store,
        dispatcher=CompletionDispatcherFactory.create(settings),
    )
