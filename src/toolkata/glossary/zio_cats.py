"""API reference for ZIO, mapped from Cats Effect."""

from __future__ import annotations

from toolkata.catalog.rows import GLOSSARY, GlossaryRow, RowTable, filter_by_category, search_entries

SLUG = "zio-cats"

CATEGORIES = frozenset({
    "BASICS",
    "ERRORS",
    "DEPENDENCIES",
    "CONCURRENCY",
    "STREAMING",
    "STM",
    "CONFIG",
    "HTTP",
    "DATABASE",
    "RUNTIME",
    "INTEROP",
})

CATEGORY_ORDER = (
    "BASICS",
    "ERRORS",
    "DEPENDENCIES",
    "CONCURRENCY",
    "STREAMING",
    "STM",
    "CONFIG",
    "HTTP",
    "DATABASE",
    "RUNTIME",
    "INTEROP",
)

ROWS = (
    # BASICS
    GlossaryRow("basics-1", "BASICS", "ZIO.succeed(a)", "IO.pure(a)", "Lift pure value into effect"),
    GlossaryRow("basics-2", "BASICS", "ZIO.fail(e)", "IO.raiseError(e)", "Lift error into effect"),
    GlossaryRow("basics-3", "BASICS", "ZIO.effect(thunk)", "IO.delay(thunk)", "Suspend side effect"),
    GlossaryRow("basics-4", "BASICS", "ZIO.attempt(thunk)", "IO.blocking(thunk)", "May throw, blocking"),
    GlossaryRow("basics-5", "BASICS", "UIO[A]", "IO[A]", "No error type (Nothing)"),
    GlossaryRow("basics-6", "BASICS", "ZIO.fromEither(e)", "IO.fromEither(e)", "From Either"),
    GlossaryRow("basics-7", "BASICS", "ZIO.fromOption(o)", "IO.fromOption(o)", "From Option"),
    # ERRORS
    GlossaryRow("errors-1", "ERRORS", "effect.catchAll(f)", "effect.handleErrorWith(f)", "Recover from error"),
    GlossaryRow(
        "errors-2",
        "ERRORS",
        "effect.orElse(fallback)",
        "effect.handleErrorWith(_ => fallback)",
        "Fallback on error",
    ),
    GlossaryRow("errors-3", "ERRORS", "effect.mapError(f)", "effect.adaptError(f)", "Transform error"),
    GlossaryRow("errors-4", "ERRORS", "effect.retry(schedule)", "effect.timeout + handleError", "Manual retries in CE"),
    GlossaryRow("errors-5", "ERRORS", "ZIO.collectAll(list)", "list.sequence", "Sequence effects"),
    # DEPENDENCIES
    GlossaryRow("deps-1", "DEPENDENCIES", "ZLayer.succeed(service)", "Resource.pure(service)", "Create dependency"),
    GlossaryRow(
        "deps-2",
        "DEPENDENCIES",
        "effect.provideLayer(layer)",
        "Kleisli.run(effect)(service)",
        "Inject dependency",
    ),
    GlossaryRow("deps-3", "DEPENDENCIES", "ZIO.service[A]", "IO.ask[A]", "Get from env (Kleisli)"),
    GlossaryRow("deps-4", "DEPENDENCIES", "layer1 ++ layer2", "Resource.forProductN", "Compose dependencies"),
    GlossaryRow("deps-5", "DEPENDENCIES", "ZManaged.acquireRelease", "Resource.make", "Resource lifecycle"),
    # CONCURRENCY
    GlossaryRow("concurrency-1", "CONCURRENCY", "effect.fork", "effect.start", "Spawn fiber"),
    GlossaryRow("concurrency-2", "CONCURRENCY", "fiber.join", "fiber.join", "Await fiber result"),
    GlossaryRow(
        "concurrency-3",
        "CONCURRENCY",
        "effect1.race(effect2)",
        "effect1.race(effect2)",
        "First to finish wins",
    ),
    GlossaryRow(
        "concurrency-4",
        "CONCURRENCY",
        "effect.timeout(duration)",
        "effect.timeout(duration)",
        "Cancel if too slow",
    ),
    GlossaryRow("concurrency-5", "CONCURRENCY", "fiber.interrupt", "fiber.cancel", "Cancel fiber"),
    GlossaryRow("concurrency-6", "CONCURRENCY", "ZIO.supervised", "Resource with cancel", "Manual supervision"),
    GlossaryRow("concurrency-7", "CONCURRENCY", "ZIO.collectAllPar(list)", "list.parSequence", "Parallel execution"),
    # STREAMING
    GlossaryRow("streaming-1", "STREAMING", "ZStream(values)", "Stream(values)", "Create stream"),
    GlossaryRow("streaming-2", "STREAMING", "stream.map(f)", "stream.map(f)", "Transform elements"),
    GlossaryRow("streaming-3", "STREAMING", "stream.filter(p)", "stream.filter(p)", "Filter elements"),
    GlossaryRow("streaming-4", "STREAMING", "stream.runCollect", "stream.compile.toList", "Collect to list"),
    GlossaryRow("streaming-5", "STREAMING", "stream.mapZIO(f)", "stream.evalMap(f)", "Effectful map"),
    GlossaryRow("streaming-6", "STREAMING", "stream.merge(other)", "stream.merge(other)", "Merge streams"),
    GlossaryRow(
        "streaming-7",
        "STREAMING",
        "ZStream.fromPath(path)",
        "Files[IO].readAll(path)",
        "File streaming (fs2)",
    ),
    # STM
    GlossaryRow("stm-1", "STM", "TRef.make(a)", "TRef.of[F](a)", "Create transactional reference"),
    GlossaryRow("stm-2", "STM", "STM.succeed(a)", "STM.pure(a)", "Pure STM value"),
    GlossaryRow("stm-3", "STM", "STM.retry", "STM.retry", "Retry transaction on TRef change"),
    GlossaryRow("stm-4", "STM", "transaction.commit", "transaction.commit[F]", "Commit STM to effect"),
    GlossaryRow("stm-5", "STM", "TMap.empty[K, V]", "TMap.empty[F, K, V]", "Transactional hash map"),
    GlossaryRow("stm-6", "STM", "TQueue.unbounded[A]", "TQueue.unbounded[F, A]", "Transactional queue"),
    # CONFIG
    GlossaryRow("config-1", "CONFIG", "ZIO.config[A]", "ConfigValue[F, A].load[F]", "Load configuration"),
    GlossaryRow("config-2", "CONFIG", "Config.string", "env(key).as[String]", "String configuration"),
    GlossaryRow("config-3", "CONFIG", "Config.int", "env(key).as[Int]", "Integer configuration"),
    GlossaryRow("config-4", "CONFIG", "ConfigProvider.envProvider", "env(key) default", "Environment variable source"),
    GlossaryRow("config-5", "CONFIG", "deriveConfig[A]", "parMapN(A)", "Automatic config derivation"),
    GlossaryRow(
        "config-6",
        "CONFIG",
        "cfg.withDefault(value)",
        "ConfigValue.default(value)",
        "Default value for config",
    ),
    GlossaryRow("config-7", "CONFIG", "cfg.validate(msg)(p)", "Custom ConfigDecoder", "Configuration validation"),
    # HTTP
    GlossaryRow(
        "http-1",
        "HTTP",
        "Http.collect[Request] { case ... }",
        "HttpRoutes.of[IO] { case ... }",
        "Define HTTP routes",
    ),
    GlossaryRow("http-2", "HTTP", "Response.text(body)", "Ok(body)", "Text response"),
    GlossaryRow("http-3", "HTTP", "Client.request(url)", "client.expect[String](uri)", "HTTP GET request"),
    GlossaryRow("http-4", "HTTP", "Server.serve(app)", "BlazeServerBuilder[IO].serve", "Start HTTP server"),
    GlossaryRow("http-5", "HTTP", 'Method.GET -> Root / "path"', 'GET -> Root / "path"', "GET route pattern"),
    GlossaryRow("http-6", "HTTP", "req.body.asJson[A]", "req.as[A]", "Parse JSON body"),
    GlossaryRow("http-7", "HTTP", "Response(status, body = Body.fromStream)", "Ok(stream)", "Streaming response"),
    # DATABASE
    GlossaryRow("database-1", "DATABASE", "query(sql).as[A]", 'sql"...".query[A]', "Execute SELECT query"),
    GlossaryRow("database-2", "DATABASE", "execute(sql).param(v)", 'sql"...$v"', "Parameterized query"),
    GlossaryRow("database-3", "DATABASE", "query(...).transaction", 'sql"...".transact(xa)', "Execute transaction"),
    GlossaryRow(
        "database-4",
        "DATABASE",
        "ZConnectionPool.h2(url, user, pass)",
        "Transactor.fromDataSource",
        "Connection pool",
    ),
    GlossaryRow(
        "database-5",
        "DATABASE",
        "execute(sql).returning",
        ".update.withUniqueGeneratedKeys",
        "Insert and return ID",
    ),
    GlossaryRow("database-6", "DATABASE", "sql ++ where", "Fragment ++ Fragment", "Query composition"),
    # RUNTIME
    GlossaryRow(
        "runtime-1",
        "RUNTIME",
        "object Main extends ZIOAppDefault",
        "object Main extends IOApp.Simple",
        "Application entry",
    ),
    GlossaryRow("runtime-2", "RUNTIME", "override val run: ZIO[...]", "val run: IO[Throwable, Unit]", "Main effect"),
    GlossaryRow("runtime-3", "RUNTIME", "override val bootstrap", "IORuntime (implicit)", "Runtime config"),
    GlossaryRow("runtime-4", "RUNTIME", "effect.onInterrupt(f)", "effect.onCancel(f)", "Shutdown hook"),
    GlossaryRow("runtime-5", "RUNTIME", "ZIO.logInfo(msg)", "logger.info(msg) (log4cats)", "Logging"),
    # INTEROP
    GlossaryRow("interop-1", "INTEROP", "zio.toIO", "Use in CE via interop", "zio-interop-cats"),
    GlossaryRow("interop-2", "INTEROP", "zio.toResource", "Use in CE via interop", "Convert ZManaged"),
    GlossaryRow("interop-3", "INTEROP", "effects.parTupled", "effects.parTupled", "Via Cats Parallel"),
    GlossaryRow("interop-4", "INTEROP", "list.traverse(ZIO)", "list.traverse(IO)", "Cats syntax"),
)

TABLE = RowTable(SLUG, GLOSSARY, ROWS, categories=CATEGORIES, category_order=CATEGORY_ORDER)


def get_categories() -> list[str]:
    return TABLE.get_categories()


__all__ = [
    "CATEGORIES",
    "CATEGORY_ORDER",
    "ROWS",
    "SLUG",
    "TABLE",
    "filter_by_category",
    "get_categories",
    "search_entries",
]
