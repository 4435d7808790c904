from box import Box
from dependency_injector import containers, providers

from rhymer.downloader.query_builder import QueryBuilder
from rhymer.downloader.simple_downloader import SimpleDownloader
from rhymer.helpers.rate_limit_manager import RateLimitManager
from rhymer.helpers.saved_words import SavedWords
from rhymer.services.word_service import WordService


class AppContainer(containers.DeclarativeContainer):
    """应用的核心服务容器"""

    config = providers.Configuration()

    # 以 Box 形式提供给需要点号访问配置的组件
    settings = providers.Singleton(Box, config)

    # Core Components
    query_builder = providers.Factory(QueryBuilder, config=settings)
    rate_limit_manager = providers.Singleton(RateLimitManager, config=settings)

    downloader = providers.Singleton(
        SimpleDownloader,
        query_builder=query_builder,
        rate_limit_manager=rate_limit_manager,
    )

    # Services
    word_service = providers.Factory(WordService, downloader=downloader)

    # Application state
    saved_words = providers.Singleton(SavedWords, path=config.saved_words.path)
