"""Effect.TS concepts mapped from their ZIO equivalents.

Note the column direction: ``from_command`` holds the Effect API and
``to_command`` the ZIO one.
"""

from __future__ import annotations

from toolkata.catalog.rows import (
    GLOSSARY,
    GlossaryRow,
    RowTable,
    filter_by_category,
    group_by_category,
    search_entries,
)

SLUG = "effect-zio"

CATEGORIES = frozenset({
    "CORE",
    "ERRORS",
    "COMPOSITION",
    "SERVICES",
    "LAYERS",
    "CONCURRENCY",
    "STREAMING",
    "SCHEMA",
    "HTTP",
    "SQL",
})

CATEGORY_ORDER = (
    "CORE",
    "ERRORS",
    "COMPOSITION",
    "SERVICES",
    "LAYERS",
    "CONCURRENCY",
    "STREAMING",
    "SCHEMA",
    "HTTP",
    "SQL",
)

ROWS = (
    # CORE
    GlossaryRow(
        "core-1",
        "CORE",
        "Effect<A, E, R>",
        "ZIO[-R, +E, +A]",
        "Type parameter order is different: Effect puts Success (A) first, while ZIO puts Environment (R) first",
    ),
    GlossaryRow(
        "core-2",
        "CORE",
        "Effect.succeed(x)",
        "ZIO.succeed(x)",
        "Creates a successful effect with the given value",
    ),
    GlossaryRow("core-3", "CORE", "Effect.fail(e)", "ZIO.fail(e)", "Creates a failed effect with the given error"),
    GlossaryRow(
        "core-4",
        "CORE",
        "Effect.try(() => ...)",
        "ZIO.attempt(...)",
        "Wraps a synchronous operation that may throw",
    ),
    GlossaryRow(
        "core-5",
        "CORE",
        "Effect.sync(() => ...)",
        "ZIO.suspend(...)",
        "Defers evaluation of a thunk (side-effecting code)",
    ),
    # ERRORS
    GlossaryRow(
        "errors-1",
        "ERRORS",
        "Effect.catchAll(fa, f)",
        "fa.catchAll(f)",
        "Handle all errors with a recovery function",
    ),
    GlossaryRow(
        "errors-2",
        "ERRORS",
        "Effect.orElse(fa, () => fb)",
        "fa.orElse(fb)",
        "Run fallback effect if first fails",
    ),
    GlossaryRow("errors-3", "ERRORS", "Effect.mapError(fa, f)", "fa.mapError(f)", "Transform the error type"),
    GlossaryRow(
        "errors-4",
        "ERRORS",
        "Effect.either(fa)",
        "fa.either",
        "Convert Effect<A, E, R> to Effect<Either<E, A>, never, R>",
    ),
    GlossaryRow(
        "errors-5",
        "ERRORS",
        "Effect.die(defect)",
        "ZIO.die(defect)",
        "Create a fatal defect (not in the typed error channel)",
    ),
    # COMPOSITION
    GlossaryRow(
        "composition-1",
        "COMPOSITION",
        "Effect.gen(function* () { ... })",
        "for { ... } yield ...",
        "Sequential composition with generators. Use yield* to unwrap effects",
    ),
    GlossaryRow(
        "composition-2",
        "COMPOSITION",
        "yield* effect",
        "<- effect (in for-comprehension)",
        "Bind/unwrap an effect in a generator",
    ),
    GlossaryRow("composition-3", "COMPOSITION", "Effect.map(fa, f)", "fa.map(f)", "Transform the success value"),
    GlossaryRow("composition-4", "COMPOSITION", "Effect.flatMap(fa, f)", "fa.flatMap(f)", "Chain effects (bind)"),
    # SERVICES
    GlossaryRow(
        "services-1",
        "SERVICES",
        "class Tag extends Context.Tag",
        "ZIO.service[T]",
        "Define service tags with Context.Tag class pattern",
    ),
    GlossaryRow(
        "services-2",
        "SERVICES",
        "yield* ServiceTag",
        "ZIO.service[ServiceType]",
        "Access a service in Effect.gen",
    ),
    GlossaryRow(
        "services-3",
        "SERVICES",
        "Layer.succeed(Tag, impl)",
        "ZLayer.succeed(impl)",
        "Create a layer from a service implementation",
    ),
    GlossaryRow(
        "services-4",
        "SERVICES",
        "Layer.effect(Tag, effect)",
        "ZLayer.fromEffect(...)",
        "Create a layer from an effect",
    ),
    # LAYERS
    GlossaryRow(
        "layers-1",
        "LAYERS",
        "Layer.provide(inner, outer)",
        "outer >>> inner",
        "Horizontal layer composition (dependencies)",
    ),
    GlossaryRow(
        "layers-2",
        "LAYERS",
        "Layer.merge(layer1, layer2)",
        "layer1 ++ layer2",
        "Vertical layer composition (merge independent layers)",
    ),
    GlossaryRow(
        "layers-3",
        "LAYERS",
        "Effect.provide(effect, layer)",
        "effect.provideLayer(layer)",
        "Provide layers to an effect",
    ),
    GlossaryRow(
        "layers-4",
        "LAYERS",
        "Layer.scoped(Tag, effect)",
        "ZLayer.scoped(...)",
        "Create a layer with scoped resource management",
    ),
    # CONCURRENCY
    GlossaryRow("concurrency-1", "CONCURRENCY", "Effect.fork(fa)", "fa.fork", "Run effect concurrently in a fiber"),
    GlossaryRow(
        "concurrency-2",
        "CONCURRENCY",
        "Fiber.join(fiber)",
        "fiber.join",
        "Wait for fiber to complete and get result",
    ),
    GlossaryRow("concurrency-3", "CONCURRENCY", "Fiber.interrupt(fiber)", "fiber.interrupt", "Cancel a running fiber"),
    GlossaryRow(
        "concurrency-4",
        "CONCURRENCY",
        "Effect.all(effects, { concurrency })",
        "ZIO.collectAllPar(effects)",
        "Run effects in parallel with concurrency control",
    ),
    GlossaryRow(
        "concurrency-5",
        "CONCURRENCY",
        "Effect.race(fa, fb)",
        "fa.race(fb)",
        "Run both effects, return result of first to succeed",
    ),
    GlossaryRow(
        "concurrency-6",
        "CONCURRENCY",
        "Ref.make(initial)",
        "Ref.make(initial)",
        "Create atomic reference for concurrent state",
    ),
    GlossaryRow(
        "concurrency-7",
        "CONCURRENCY",
        "Ref.get/set/update(ref, ...)",
        "ref.get/set/update",
        "Atomic operations on Ref",
    ),
    # STREAMING
    GlossaryRow(
        "streaming-1",
        "STREAMING",
        "Stream<A, E, R>",
        "ZStream[-R, +E, +O]",
        "Stream type with Output (A) first, unlike ZStream",
    ),
    GlossaryRow("streaming-2", "STREAMING", "Stream.succeed(...)", "ZStream(...)", "Create stream from values"),
    GlossaryRow(
        "streaming-3",
        "STREAMING",
        "Stream.map/flatMap/filter(stream, f)",
        "stream.map/flatMap/filter",
        "Stream transformations use pipe syntax",
    ),
    GlossaryRow(
        "streaming-4",
        "STREAMING",
        "Stream.runCollect(stream)",
        "stream.runCollect",
        "Collect stream elements into array",
    ),
    GlossaryRow(
        "streaming-5",
        "STREAMING",
        "Sink.count/last/...",
        "ZSink.count/last/...",
        "Aggregators for stream consumption",
    ),
    # SCHEMA
    GlossaryRow("schema-1", "SCHEMA", "Schema<A>", "Schema[A]", "Runtime type validation and transformation"),
    GlossaryRow(
        "schema-2",
        "SCHEMA",
        "Schema.decodeUnknown(schema)(data)",
        "schema.decode(data)",
        "Parse/validate unknown data into typed value",
    ),
    GlossaryRow(
        "schema-3",
        "SCHEMA",
        "Schema.optional(Schema.String)",
        "Option[String]",
        "Optional/nullable field in schema",
    ),
    # HTTP
    GlossaryRow(
        "http-1",
        "HTTP",
        "HttpClient service",
        "Client.service (ZIO HTTP)",
        "HTTP client service from @effect/platform",
    ),
    GlossaryRow(
        "http-2",
        "HTTP",
        "client.get/post(url, options)",
        "Client.get/post(url, ...)",
        "HTTP methods return HttpClientResponse effect",
    ),
    GlossaryRow(
        "http-3",
        "HTTP",
        "response.json/text",
        "response.body.asString",
        "Get response body as parsed JSON or text",
    ),
    # SQL
    GlossaryRow(
        "sql-1",
        "SQL",
        "SqlClient service",
        "JdbcService (ZIO JDBC)",
        "Database client service from @effect/sql",
    ),
    GlossaryRow(
        "sql-2",
        "SQL",
        "sql`SELECT ... WHERE id = ${id}`",
        'sql"SELECT ... WHERE id = $id"',
        "Template literal SQL with automatic parameterization",
    ),
    GlossaryRow(
        "sql-3",
        "SQL",
        "SqlClient.transaction(effect)",
        "jdbc.transaction { ... }",
        "Run effects in a database transaction",
    ),
)

TABLE = RowTable(SLUG, GLOSSARY, ROWS, categories=CATEGORIES, category_order=CATEGORY_ORDER)


def get_categories() -> list[str]:
    return TABLE.get_categories()


def get_effect_zio_glossary() -> tuple[GlossaryRow, ...]:
    return ROWS


def get_effect_zio_glossary_by_category() -> dict[str, list[GlossaryRow]]:
    return group_by_category(ROWS)


def search_effect_zio_glossary(query: str):
    """Like :func:`search_entries`, but the category label also matches."""
    if not query:
        return ROWS
    needle = query.casefold()
    return [
        row
        for row in ROWS
        if needle in row.category.casefold() or any(needle in field.casefold() for field in row.search_fields())
    ]


__all__ = [
    "CATEGORIES",
    "CATEGORY_ORDER",
    "ROWS",
    "SLUG",
    "TABLE",
    "filter_by_category",
    "get_categories",
    "get_effect_zio_glossary",
    "get_effect_zio_glossary_by_category",
    "search_effect_zio_glossary",
    "search_entries",
]
