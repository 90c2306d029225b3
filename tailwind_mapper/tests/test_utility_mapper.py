"""Tests for Tailwind Mapper services."""

import asyncio
import pytest

from ..services import BaseService, ServiceRegistry, UtilityMapperService
from ..utils.error import ConfigurationError, CssSyntaxError, ServiceError


class ConcreteBaseService(BaseService):
    async def initialize(self):
        self.initialized = True

    def get_stats(self):
        return {'initialized': self.initialized}


class FailingService(ConcreteBaseService):
    async def initialize(self):
        raise RuntimeError("boom")

    def cleanup(self):
        raise RuntimeError("cleanup failed")


class TestBaseService:
    """Tests for BaseService."""

    def test_logging(self):
        """Test logging functionality."""
        service = ConcreteBaseService()
        service.log_info("Test info")
        service.log_warning("Test warning")
        service.log_error("Test error")
        service.log_error("Test error", ValueError("detail"))
        service.log_debug("Test debug")

    def test_error_handling(self):
        """Test unexpected errors are raised as ServiceError."""
        service = ConcreteBaseService()
        error = ValueError("Test error")
        with pytest.raises(ServiceError) as exc_info:
            service.handle_error(error, 'load', "Test message")
        assert exc_info.value.service == 'ConcreteBaseService'
        assert exc_info.value.operation == 'load'
        assert exc_info.value.__cause__ is error

    def test_context_manager(self):
        """Test context manager cleans up on exit."""
        with ConcreteBaseService() as service:
            asyncio.run(service.initialize())
            assert service.initialized
        assert not service.initialized


class TestUtilityMapperService:
    """Tests for UtilityMapperService."""

    def test_initialize(self, utility_mapper):
        """Test initialization builds the indexes."""
        stats = utility_mapper.get_stats()
        assert stats['initialized'] is True
        assert stats['properties'] > 0
        assert stats['utilities'] > 0
        assert stats['colors'] == 5
        assert stats['conversions'] == 0

    def test_convert(self, utility_mapper):
        """Test conversion through the service counts requests."""
        result = utility_mapper.convert_css_to_tailwind('.el { display: flex; margin: 1rem; }')
        assert result['tailwindClasses'] == 'flex m-4'
        utility_mapper.convert_css_to_tailwind('.el { display: block; }', mode='inline', version='v3')
        assert utility_mapper.get_stats()['conversions'] == 2

    def test_convert_invalid_css(self, utility_mapper):
        with pytest.raises(CssSyntaxError):
            utility_mapper.convert_css_to_tailwind('.el { margin 1rem; }')
        assert utility_mapper.get_stats()['conversions'] == 0

    def test_not_initialized(self):
        """Test queries before initialize fail with ServiceError."""
        service = UtilityMapperService(mapping_file=None)
        with pytest.raises(ServiceError):
            service.convert_css_to_tailwind('.el { display: flex; }')
        with pytest.raises(ServiceError):
            service.generate_arbitrary_utility('margin', '3px')
        assert service.get_utilities() == []
        assert service.get_stats()['initialized'] is False

    def test_cleanup(self):
        """Test cleanup drops the indexes."""
        service = UtilityMapperService(mapping_file=None)
        asyncio.run(service.initialize())
        service.cleanup()
        assert service.get_stats() == {
            'initialized': False,
            'properties': 0,
            'utilities': 0,
            'colors': 0,
            'conversions': 0,
        }

    def test_mapping_file(self, mapping_file):
        """Test a mapping file extends the default table."""
        service = UtilityMapperService(mapping_file=mapping_file)
        asyncio.run(service.initialize())
        try:
            result = service.convert_css_to_tailwind('.el { margin: 1.75rem; opacity: 0.5; margin: 0; }')
            assert result['tailwindClasses'] == 'm-7 opacity-50 m-0'
            assert 'unsupportedStyles' not in result
            assert [u['name'] for u in service.get_utilities(category='effects')] == ['opacity-50']
        finally:
            service.cleanup()

    def test_missing_mapping_file(self, tmp_path):
        """Test a missing mapping file is a configuration error."""
        service = UtilityMapperService(mapping_file=str(tmp_path / 'missing.json'))
        with pytest.raises(ConfigurationError):
            asyncio.run(service.initialize())
        assert not service.initialized

    def test_utilities_by_category(self, utility_mapper):
        """Test category filter."""
        utilities = utility_mapper.get_utilities(category='spacing')
        assert utilities
        assert all(u['category'] == 'spacing' for u in utilities)
        assert 'm-4' in [u['name'] for u in utilities]

    def test_utilities_by_property(self, utility_mapper):
        """Test property filter keeps table order."""
        names = [u['name'] for u in utility_mapper.get_utilities(property='display')]
        assert names[:3] == ['block', 'inline-block', 'inline']
        assert 'hidden' in names

    @pytest.mark.parametrize('kwargs', [
        {},
        {'category': 'spacing'},
        {'property': 'margin'},
        {'search': 'm-4'},
    ])
    def test_utilities_are_copies(self, utility_mapper, kwargs):
        """Test changing a returned utility leaves later lookups untouched."""
        first = utility_mapper.get_utilities(**kwargs)
        expected = utility_mapper.get_utilities(**kwargs)
        first[0]['name'] = 'changed'
        first[0]['values'].append({'cssValue': 'x', 'className': 'x'})
        first[0]['values'][0]['className'] = 'changed'
        first[0]['modifiers'][0]['prefix'] = 'changed:'
        assert utility_mapper.get_utilities(**kwargs) == expected

    def test_colors_are_copies(self, utility_mapper):
        """Test changing a returned color leaves later lookups untouched."""
        blue = utility_mapper.get_color_info('blue')[0]
        blue['shades']['500'] = '#000000'
        blue['usage'].clear()
        utility_mapper.get_colors()[0]['name'] = 'changed'
        again = utility_mapper.get_colors(color_name='blue')[0]
        assert again['shades']['500'] != '#000000'
        assert again['usage']
        assert 'changed' not in [c['name'] for c in utility_mapper.get_colors()]

    def test_utility_record(self, utility_mapper):
        """Test the fields of a utility record."""
        [utility] = [u for u in utility_mapper.get_utilities(property='margin') if u['name'] == 'm-4']
        assert utility['cssProperty'] == 'margin'
        assert utility['values'] == [{'cssValue': '1rem', 'className': 'm-4'}]
        assert utility['documentation'] == 'Sets margin to 1rem'
        assert utility['examples'][0]['code'] == '<div class="m-4">Content</div>'
        assert any(modifier['prefix'] == 'hover:' for modifier in utility['modifiers'])

    def test_search(self, utility_mapper):
        """Test exact name matches sort first."""
        results = utility_mapper.get_utilities(search='flex')
        assert results[0]['name'] == 'flex'
        assert 'flex-col' in [u['name'] for u in results]

    def test_filter_precedence(self, utility_mapper):
        """Test the category filter wins over the others."""
        results = utility_mapper.get_utilities(category='grid', property='margin', search='m-4')
        assert all(u['category'] == 'grid' for u in results)

    def test_all_utilities(self, utility_mapper):
        assert len(utility_mapper.get_utilities()) == utility_mapper.get_stats()['utilities']

    def test_unknown_filters(self, utility_mapper):
        assert utility_mapper.get_utilities(category='nope') == []
        assert utility_mapper.get_utilities(property='filter') == []
        assert utility_mapper.get_utilities(search='zzzz') == []

    def test_colors(self, utility_mapper):
        """Test palette lookup."""
        [blue] = utility_mapper.get_colors('blue')
        assert blue['shades']['500'] == '#3b82f6'
        assert 'bg-blue-500' in blue['usage']
        assert len(utility_mapper.get_colors()) == 5

    def test_colors_without_shades(self, utility_mapper):
        [blue] = utility_mapper.get_colors('blue', include_shades=False)
        assert blue['shades'] == {}
        assert blue['usage']
        # The index keeps its shades
        assert utility_mapper.get_color_info('blue')[0]['shades']

    def test_unknown_color(self, utility_mapper):
        assert utility_mapper.get_colors('chartreuse') == []

    def test_generate_arbitrary_utility(self, utility_mapper):
        """Test arbitrary class generation."""
        assert utility_mapper.generate_arbitrary_utility('margin', '3px') == 'm-[3px]'
        assert utility_mapper.generate_arbitrary_utility('margin', '0 auto') == 'm-[0_auto]'
        assert utility_mapper.generate_arbitrary_utility('display', 'ruby') is None
        assert utility_mapper.generate_arbitrary_utility('filter', 'none') is None
        assert utility_mapper.generate_arbitrary_utility('margin', '  ') is None


class TestServiceRegistry:
    """Tests for ServiceRegistry."""

    def test_utility_mapper_cached(self):
        """Test the registry hands out one utility mapper."""
        registry = ServiceRegistry()
        mapper = registry.create_utility_mapper()
        assert registry.create_utility_mapper() is mapper
        assert registry.get('utility_mapper') is mapper
        assert registry.get('missing') is None

    def test_register(self):
        registry = ServiceRegistry()
        service = ConcreteBaseService()
        assert registry.register('custom', service) is service
        assert registry.get_all_services() == {'custom': service}
        replacement = ConcreteBaseService()
        registry.register('custom', replacement)
        assert registry.get('custom') is replacement

    def test_initialize_all(self):
        """Test all services initialize and report stats."""
        registry = ServiceRegistry()
        registry.create_utility_mapper()
        registry.register('custom', ConcreteBaseService())
        asyncio.run(registry.initialize_all())
        stats = registry.get_all_stats()
        assert stats['custom'] == {'initialized': True}
        assert stats['utility_mapper']['initialized'] is True
        registry.cleanup_all()
        assert registry.get_all_stats()['utility_mapper']['initialized'] is False

    def test_initialize_all_failure(self):
        registry = ServiceRegistry()
        registry.register('failing', FailingService())
        with pytest.raises(RuntimeError):
            asyncio.run(registry.initialize_all())

    def test_cleanup_continues_past_failures(self):
        """Test one failing cleanup does not stop the others."""
        registry = ServiceRegistry()
        registry.register('failing', FailingService())
        healthy = registry.register('healthy', ConcreteBaseService())
        asyncio.run(healthy.initialize())
        registry.cleanup_all()
        assert not healthy.initialized

    def test_context_manager(self):
        with ServiceRegistry() as registry:
            service = registry.register('custom', ConcreteBaseService())
            asyncio.run(service.initialize())
        assert not service.initialized
