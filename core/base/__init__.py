"""
Core Base Module

Provides shared mixins, managers and helpers for all portal apps.

Exports:
    Mixins (core.base.models):
        - TimestampMixin: Adds created_at, updated_at
        - ActiveFlagMixin: Adds is_active + deactivate()/reactivate()
        - PublishableMixin: Adds is_published

    Managers & QuerySets (core.base.managers):
        - BaseQuerySet: Base queryset with filter_by_search_params
        - ActiveQuerySet / ActiveManager: active()/inactive() filters
        - PublishedQuerySet / PublishedManager: published()/drafts() filters

    Public response cache (core.base.page_cache):
        - cache_public_response: caches successful GET bodies per path
        - revalidate_paths: drops cached bodies after a mutation

Import from the submodules directly; model modules must not be imported
before the app registry is ready.
"""
