from app.bundling.merger import bundle_rubric, merge_field
from app.bundling.validator import RequestValidator
from app.completion.dispatcher import CompletionDispatcher
from app.extraction.models import ImageInput, InputField
from app.extraction.registry import ExtractorRegistry
from app.generation.pipeline import GenerationContext, PipelineStep
from app.logging.logger import Log
from app.prompting.assembler import PromptFields, assemble
from app.prompting.prompt_loader import TemplateStore


class CheckUploadsStep(PipelineStep):
    def __init__(self, validator: RequestValidator) -> None:
        self._validator = validator

    def run(self, context: GenerationContext) -> GenerationContext:
        self._validator.check_uploads(context.request.uploads())
        return context


class ExtractAttachmentsStep(PipelineStep):
    def __init__(self, registry: ExtractorRegistry, input_field: InputField) -> None:
        self._registry = registry
        self._field = input_field

    def run(self, context: GenerationContext) -> GenerationContext:
        for attachment in context.request.files(self._field):
            result = self._registry.extract(attachment, self._field)
            if isinstance(result, ImageInput):
                context.images.append(result)
            else:
                context.chunks[self._field].append(result)
        Log.info(
            f"Extracted {len(context.chunks[self._field])} text chunk(s) from "
            f"{self._field.value} attachments"
        )
        return context


class MergeBundlesStep(PipelineStep):
    def run(self, context: GenerationContext) -> GenerationContext:
        for input_field in InputField:
            context.bundles[input_field] = merge_field(
                input_field,
                context.request.literal_text(input_field),
                context.chunks[input_field],
            )
        return context


class CheckTranscriptStep(PipelineStep):
    def __init__(self, validator: RequestValidator) -> None:
        self._validator = validator

    def run(self, context: GenerationContext) -> GenerationContext:
        self._validator.check_transcript(
            context.bundles[InputField.TRANSCRIPT], context.images
        )
        return context


class AssemblePromptStep(PipelineStep):
    def __init__(self, template_store: TemplateStore) -> None:
        self._template_store = template_store

    def run(self, context: GenerationContext) -> GenerationContext:
        template = self._template_store.get()
        context_bundle = bundle_rubric(
            context.bundles[InputField.TRANSCRIPT],
            context.bundles[InputField.RUBRIC],
        )
        prompt_fields = PromptFields.for_context(
            context_bundle, has_images=bool(context.images)
        )
        context.prompt = assemble(template, prompt_fields)
        Log.info(f"Assembled prompt of {len(context.prompt)} chars")
        return context


class CompleteStep(PipelineStep):
    def __init__(self, dispatcher: CompletionDispatcher) -> None:
        self._dispatcher = dispatcher

    def run(self, context: GenerationContext) -> GenerationContext:
        context.output = self._dispatcher.complete(context.prompt, context.images)
        return context
